"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from docfork.application.ports.repositories import (
    AuditNoteRepository,
    DocumentRepository,
    ForkRepository,
    PropertyRepository,
    RevisionRepository,
    TaxonomyRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def forks(self) -> ForkRepository: ...

    @property
    def properties(self) -> PropertyRepository: ...

    @property
    def taxonomies(self) -> TaxonomyRepository: ...

    @property
    def revisions(self) -> RevisionRepository: ...

    @property
    def notes(self) -> AuditNoteRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Opens a UnitOfWork. Commits on clean exit, rolls back on error."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
