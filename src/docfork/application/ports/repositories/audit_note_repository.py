"""Audit note repository port."""

from typing import Protocol
from uuid import UUID

from docfork.domain.entities import AuditNote


class AuditNoteRepository(Protocol):
    """Port for the audit log attached to documents."""

    async def add(self, note: AuditNote) -> AuditNote: ...

    async def list_by_document(self, document_id: UUID) -> list[AuditNote]: ...
