"""Fork entity - metadata of a working copy of a document."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docfork.domain.entities.snapshot import Snapshot
from docfork.domain.value_objects import ForkState

# Kind tag of the documents holding fork content.
FORK_KIND = "fork"


@dataclass
class Fork:
    """Fork of an original document.

    The fork's editable fields live in a Document of kind ``fork`` with the
    same id; this entity carries the link to the original and the base
    snapshot used by the merge.
    """

    id: UUID
    original_id: UUID
    original_kind: str
    state: ForkState
    base_snapshot: Snapshot
    created_at: datetime
    created_by: str | None = None
    merged_at: datetime | None = None
    merged_by: str | None = None

    @property
    def is_merged(self) -> bool:
        return self.state is ForkState.MERGED
