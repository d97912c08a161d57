"""Revision entity - backup of a document before a merge."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from docfork.domain.entities.document import Document


@dataclass
class Revision:
    """Copy of a document's mergeable fields at a point in time."""

    id: UUID
    document_id: UUID
    title: str
    content: str
    excerpt: str
    created_at: datetime

    @classmethod
    def of(cls, document: Document, created_at: datetime) -> "Revision":
        return cls(
            id=uuid4(),
            document_id=document.id,
            title=document.title,
            content=document.content,
            excerpt=document.excerpt,
            created_at=created_at,
        )
