"""Comparison DTOs - side-by-side view of fork and original."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docfork.domain.value_objects import MergeField


@dataclass
class FieldComparison:
    """One mergeable field, original vs fork."""

    field: MergeField
    original_value: str
    fork_value: str

    @property
    def changed(self) -> bool:
        return self.original_value != self.fork_value


@dataclass
class ComparisonView:
    """Fork compared with the current state of its original."""

    fork_id: UUID
    original_id: UUID
    fields: list[FieldComparison]
    original_modified_at: datetime
    fork_modified_at: datetime

    @property
    def has_changes(self) -> bool:
        return any(f.changed for f in self.fields)
