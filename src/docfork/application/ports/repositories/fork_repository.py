"""Fork repository port - fork metadata and base snapshot."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from docfork.domain.entities import Fork
from docfork.domain.value_objects import ForkState


class ForkRepository(Protocol):
    """Port for fork persistence."""

    async def get_by_id(self, fork_id: UUID) -> Fork | None: ...

    async def get_for_update(self, fork_id: UUID) -> Fork | None:
        """Get fork and lock it until the end of the unit of work."""
        ...

    async def list(
        self,
        *,
        original_id: UUID | None = None,
        state: ForkState | None = None,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Fork], str | None]: ...

    async def create(self, fork: Fork) -> Fork: ...

    async def mark_merged(
        self, fork_id: UUID, merged_by: str, merged_at: datetime
    ) -> bool:
        """Set state to merged only if it is still draft. Returns whether it applied."""
        ...

    async def delete(self, fork_id: UUID) -> None: ...
