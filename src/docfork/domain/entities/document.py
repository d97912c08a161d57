"""Document entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docfork.domain.value_objects import DocumentStatus, MergeField


@dataclass
class Document:
    """Versioned document with mergeable title, content and excerpt."""

    id: UUID
    kind: str
    title: str
    content: str
    excerpt: str
    status: DocumentStatus
    created_at: datetime
    modified_at: datetime
    author_id: str | None = None
    deleted_at: datetime | None = None

    def field_value(self, field: MergeField) -> str:
        return getattr(self, field.value)

    def field_values(self) -> dict[MergeField, str]:
        return {f: self.field_value(f) for f in MergeField}
