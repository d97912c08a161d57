"""Audit note entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

MERGE_NOTE_TYPE = "fork_merge"


@dataclass
class AuditNote:
    """Note attached to a document, attributable to a user."""

    id: UUID
    document_id: UUID
    author_id: str
    content: str
    created_at: datetime
    note_type: str = MERGE_NOTE_TYPE
    author_name: str | None = None
    author_email: str | None = None
