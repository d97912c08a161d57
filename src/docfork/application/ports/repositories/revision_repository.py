"""Revision repository port - pre-merge backups."""

from typing import Protocol
from uuid import UUID

from docfork.domain.entities import Revision


class RevisionRepository(Protocol):
    """Port for document revision persistence."""

    async def create(self, revision: Revision) -> Revision: ...

    async def list_by_document(self, document_id: UUID) -> list[Revision]: ...
