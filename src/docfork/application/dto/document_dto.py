"""Document DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docfork.domain.value_objects import DocumentStatus


@dataclass
class DocumentOutput:
    """Output DTO for document with its auxiliary data."""

    id: UUID
    kind: str
    title: str
    content: str
    excerpt: str
    status: DocumentStatus
    created_at: datetime
    modified_at: datetime
    properties: dict[str, list[str]]
    terms: dict[str, list[str]]
    primary_image_id: str | None
