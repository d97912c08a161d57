"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from docfork.application.ports import UnitOfWorkFactory
from docfork.domain.exceptions import StoreError
from docfork.infrastructure.persistence.postgres.audit_note_repository import (
    PostgresAuditNoteRepository,
)
from docfork.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)
from docfork.infrastructure.persistence.postgres.fork_repository import (
    PostgresForkRepository,
)
from docfork.infrastructure.persistence.postgres.property_repository import (
    PostgresPropertyRepository,
)
from docfork.infrastructure.persistence.postgres.revision_repository import (
    PostgresRevisionRepository,
)
from docfork.infrastructure.persistence.postgres.taxonomy_repository import (
    PostgresTaxonomyRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._documents = PostgresDocumentRepository(self._conn)
        self._forks = PostgresForkRepository(self._conn)
        self._properties = PostgresPropertyRepository(self._conn)
        self._taxonomies = PostgresTaxonomyRepository(self._conn)
        self._revisions = PostgresRevisionRepository(self._conn)
        self._notes = PostgresAuditNoteRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def documents(self) -> PostgresDocumentRepository:
        return self._documents

    @property
    def forks(self) -> PostgresForkRepository:
        return self._forks

    @property
    def properties(self) -> PostgresPropertyRepository:
        return self._properties

    @property
    def taxonomies(self) -> PostgresTaxonomyRepository:
        return self._taxonomies

    @property
    def revisions(self) -> PostgresRevisionRepository:
        return self._revisions

    @property
    def notes(self) -> PostgresAuditNoteRepository:
        return self._notes

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> UnitOfWorkFactory:
    """Create UnitOfWork factory (async context manager).

    Database errors leave the factory as StoreError with the driver error
    chained; the transaction is rolled back first.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with PostgresUnitOfWork(pool) as uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            logger.error("Store operation failed: %s", e)
            raise StoreError(str(e)) from e

    return factory
