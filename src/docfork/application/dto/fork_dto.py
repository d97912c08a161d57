"""Fork DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docfork.domain.entities import Document, Fork
from docfork.domain.value_objects import DocumentStatus, ForkState, MergeField


@dataclass
class ForkUpdateInput:
    """Changes to a fork's mergeable fields. None leaves a field untouched."""

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None

    def changes(self) -> dict[MergeField, str]:
        return {
            f: getattr(self, f.value)
            for f in MergeField
            if getattr(self, f.value) is not None
        }


@dataclass
class ForkOutput:
    """Output DTO for fork."""

    id: UUID
    original_id: UUID
    original_kind: str
    state: ForkState
    title: str
    content: str
    excerpt: str
    base: dict[str, str | None]
    created_at: datetime
    modified_at: datetime
    created_by: str | None
    merged_at: datetime | None
    merged_by: str | None
    locked: bool

    @classmethod
    def of(cls, fork: Fork, document: Document) -> "ForkOutput":
        return cls(
            id=fork.id,
            original_id=fork.original_id,
            original_kind=fork.original_kind,
            state=fork.state,
            title=document.title,
            content=document.content,
            excerpt=document.excerpt,
            base={f.value: fork.base_snapshot.get(f) for f in MergeField},
            created_at=fork.created_at,
            modified_at=document.modified_at,
            created_by=fork.created_by,
            merged_at=fork.merged_at,
            merged_by=fork.merged_by,
            locked=fork.is_merged or document.status is DocumentStatus.TRASHED,
        )
