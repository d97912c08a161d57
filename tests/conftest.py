"""Pytest fixtures for docfork tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from docfork.application.services.fork_manager import ForkManager
from docfork.domain.entities import (
    AuditNote,
    Document,
    Fork,
    Property,
    Revision,
)
from docfork.domain.value_objects import Actor, DocumentStatus, ForkState, MergeField
from docfork.domain.value_objects.property_key import PRIMARY_IMAGE_KEY


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Document] = {}

    async def get_by_id(
        self, document_id: UUID, include_deleted: bool = False
    ) -> Document | None:
        doc = self._by_id.get(document_id)
        if not doc or (not include_deleted and doc.deleted_at):
            return None
        return doc

    async def create(self, document: Document) -> Document:
        self._by_id[document.id] = document
        return document

    async def update_fields(
        self,
        document_id: UUID,
        fields: Mapping[MergeField, str],
        modified_at: datetime,
    ) -> None:
        doc = self._by_id.get(document_id)
        if doc:
            self._by_id[document_id] = replace(
                doc,
                modified_at=modified_at,
                **{f.value: v for f, v in fields.items()},
            )

    async def soft_delete(self, document_id: UUID) -> None:
        doc = self._by_id.get(document_id)
        if doc:
            self._by_id[document_id] = replace(
                doc, status=DocumentStatus.TRASHED, deleted_at=datetime.now(UTC)
            )

    async def hard_delete(self, document_id: UUID) -> None:
        self._by_id.pop(document_id, None)


class FakeForkRepository:
    """In-memory fork repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Fork] = {}

    async def get_by_id(self, fork_id: UUID) -> Fork | None:
        return self._by_id.get(fork_id)

    async def get_for_update(self, fork_id: UUID) -> Fork | None:
        return self._by_id.get(fork_id)

    async def list(
        self,
        *,
        original_id: UUID | None = None,
        state: ForkState | None = None,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Fork], str | None]:
        items = list(self._by_id.values())
        if original_id:
            items = [f for f in items if f.original_id == original_id]
        if state:
            items = [f for f in items if f.state is state]
        if cursor:
            cursor_uuid = UUID(cursor)
            items = [f for f in items if f.id > cursor_uuid]
        items.sort(key=lambda f: f.id)
        page = items[: limit + 1]
        next_cursor = str(page[limit - 1].id) if len(page) > limit else None
        return (page[:limit], next_cursor)

    async def create(self, fork: Fork) -> Fork:
        self._by_id[fork.id] = fork
        return fork

    async def mark_merged(
        self, fork_id: UUID, merged_by: str, merged_at: datetime
    ) -> bool:
        fork = self._by_id.get(fork_id)
        if not fork or fork.is_merged:
            return False
        self._by_id[fork_id] = replace(
            fork, state=ForkState.MERGED, merged_by=merged_by, merged_at=merged_at
        )
        return True

    async def delete(self, fork_id: UUID) -> None:
        self._by_id.pop(fork_id, None)


class FakePropertyRepository:
    """In-memory property repository."""

    def __init__(self) -> None:
        self._store: list[Property] = []

    async def list_by_document(self, document_id: UUID) -> list[Property]:
        return [p for p in self._store if p.document_id == document_id]

    async def create_batch(self, properties: list[Property]) -> None:
        self._store.extend(properties)

    async def delete_key(self, document_id: UUID, key: str) -> None:
        self._store = [
            p for p in self._store if not (p.document_id == document_id and p.key == key)
        ]

    async def delete_by_document(self, document_id: UUID) -> None:
        self._store = [p for p in self._store if p.document_id != document_id]

    async def get_primary_image(self, document_id: UUID) -> str | None:
        for p in self._store:
            if p.document_id == document_id and p.key == PRIMARY_IMAGE_KEY:
                return p.value
        return None

    async def set_primary_image(self, document_id: UUID, image_id: str) -> None:
        await self.delete_key(document_id, PRIMARY_IMAGE_KEY)
        self._store.append(Property(document_id, PRIMARY_IMAGE_KEY, image_id))


class FakeTaxonomyRepository:
    """In-memory taxonomy repository."""

    def __init__(self) -> None:
        self._terms: dict[tuple[UUID, str], set[str]] = {}

    async def list_taxonomies(self, document_id: UUID) -> list[str]:
        return sorted(
            taxonomy
            for (doc_id, taxonomy), terms in self._terms.items()
            if doc_id == document_id and terms
        )

    async def get_terms(self, document_id: UUID, taxonomy: str) -> set[str]:
        return set(self._terms.get((document_id, taxonomy), set()))

    async def set_terms(self, document_id: UUID, taxonomy: str, term_ids: set[str]) -> None:
        self._terms[(document_id, taxonomy)] = set(term_ids)

    async def delete_by_document(self, document_id: UUID) -> None:
        self._terms = {k: v for k, v in self._terms.items() if k[0] != document_id}


class FakeRevisionRepository:
    """In-memory revision repository."""

    def __init__(self) -> None:
        self._store: list[Revision] = []

    async def create(self, revision: Revision) -> Revision:
        self._store.append(revision)
        return revision

    async def list_by_document(self, document_id: UUID) -> list[Revision]:
        return [r for r in self._store if r.document_id == document_id]


class FakeAuditNoteRepository:
    """In-memory audit note repository."""

    def __init__(self) -> None:
        self._store: list[AuditNote] = []

    async def add(self, note: AuditNote) -> AuditNote:
        self._store.append(note)
        return note

    async def list_by_document(self, document_id: UUID) -> list[AuditNote]:
        return [n for n in self._store if n.document_id == document_id]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.documents = FakeDocumentRepository()
        self.forks = FakeForkRepository()
        self.properties = FakePropertyRepository()
        self.taxonomies = FakeTaxonomyRepository()
        self.revisions = FakeRevisionRepository()
        self.notes = FakeAuditNoteRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_document(
    *,
    kind: str = "post",
    title: str = "Title",
    content: str = "Content",
    excerpt: str = "Excerpt",
    status: DocumentStatus = DocumentStatus.PUBLISHED,
) -> Document:
    """Build a document with sensible defaults."""
    now = datetime.now(UTC)
    return Document(
        id=uuid4(),
        kind=kind,
        title=title,
        content=content,
        excerpt=excerpt,
        status=status,
        created_at=now,
        modified_at=now,
        author_id="author-1",
    )


async def seed_document(uow: FakeUnitOfWork, **kwargs) -> Document:
    """Store a new document in the fake UoW and return it."""
    return await uow.documents.create(make_document(**kwargs))


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager that yields the test's UoW."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def actor() -> Actor:
    return Actor(user_id="user-1", display_name="Jane Editor", email="jane@example.com")


@pytest.fixture
def fork_manager() -> ForkManager:
    return ForkManager(forkable_kinds=("post", "page"))
