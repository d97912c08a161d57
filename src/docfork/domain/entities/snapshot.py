"""Snapshot entity - base values for the three-way merge."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from docfork.domain.entities.document import Document
from docfork.domain.value_objects import MergeField


@dataclass(frozen=True)
class Snapshot:
    """Mergeable field values of the original document at fork creation.

    Immutable: the mapping is wrapped in a read-only proxy. A field may be
    None when the store has no recorded base value for it.
    """

    values: Mapping[MergeField, str | None]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def of(cls, document: Document) -> "Snapshot":
        """Capture the current mergeable fields of a document."""
        return cls(values=document.field_values())

    def get(self, field: MergeField) -> str | None:
        return self.values.get(field)
