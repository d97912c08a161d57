"""Merge result DTO."""

from dataclasses import dataclass, field
from uuid import UUID

from docfork.domain.services.three_way_merge import Conflict

MESSAGE_MERGED = "Fork merged successfully!"
MESSAGE_MERGED_WITH_CONFLICTS = "Fork merged with conflicts. Please review the changes."


@dataclass
class MergeResult:
    """Outcome of merging a fork into its original document."""

    original_id: UUID
    original_url: str
    conflicts: list[Conflict] = field(default_factory=list)
    success: bool = True

    @property
    def has_conflicts(self) -> bool:
        return len(self.conflicts) > 0

    @property
    def message(self) -> str:
        return MESSAGE_MERGED_WITH_CONFLICTS if self.has_conflicts else MESSAGE_MERGED
