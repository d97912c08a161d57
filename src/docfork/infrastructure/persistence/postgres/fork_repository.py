"""PostgreSQL fork repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from docfork.domain.entities import Fork, Snapshot
from docfork.domain.value_objects import ForkState, MergeField

_BASE_COLUMNS = ", ".join(f"base_{f.value}" for f in MergeField)
_COLUMNS = (
    "id, original_id, original_kind, state, created_at, created_by, "
    f"merged_at, merged_by, {_BASE_COLUMNS}"
)


def _row_to_fork(r: tuple) -> Fork:
    base = r[8:]
    return Fork(
        id=r[0],
        original_id=r[1],
        original_kind=r[2],
        state=ForkState(r[3]),
        created_at=r[4],
        created_by=r[5],
        merged_at=r[6],
        merged_by=r[7],
        base_snapshot=Snapshot(values=dict(zip(MergeField, base, strict=True))),
    )


class PostgresForkRepository:
    """Fork repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, fork_id: UUID) -> Fork | None:
        """Get fork by id."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM fork WHERE id = %s", (fork_id,))
        r = await cur.fetchone()
        return _row_to_fork(r) if r else None

    async def get_for_update(self, fork_id: UUID) -> Fork | None:
        """Get fork and lock its row until commit or rollback."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM fork WHERE id = %s FOR UPDATE", (fork_id,)
        )
        r = await cur.fetchone()
        return _row_to_fork(r) if r else None

    async def list(
        self,
        *,
        original_id: UUID | None = None,
        state: ForkState | None = None,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Fork], str | None]:
        """List forks with cursor pagination."""
        conditions = []
        _params: list[object] = []
        if original_id:
            conditions.append("original_id = %s")
            _params.append(original_id)
        if state:
            conditions.append("state = %s")
            _params.append(state.value)
        if cursor:
            conditions.append("id > %s")
            _params.append(UUID(cursor))
        where = (" WHERE " + " AND ".join(conditions)) if conditions else ""
        params = tuple(_params) + (limit + 1,)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM fork{where} ORDER BY id LIMIT %s", params
        )
        rows = await cur.fetchall()
        forks = [_row_to_fork(r) for r in rows[:limit]]
        next_cursor = str(forks[-1].id) if len(rows) > limit else None
        return forks, next_cursor

    async def create(self, fork: Fork) -> Fork:
        """Create fork with its base snapshot."""
        placeholders = ", ".join(["%s"] * (8 + len(MergeField)))
        await self._conn.execute(
            f"INSERT INTO fork ({_COLUMNS}) VALUES ({placeholders})",
            (
                fork.id,
                fork.original_id,
                fork.original_kind,
                fork.state.value,
                fork.created_at,
                fork.created_by,
                fork.merged_at,
                fork.merged_by,
                *(fork.base_snapshot.get(f) for f in MergeField),
            ),
        )
        return fork

    async def mark_merged(self, fork_id: UUID, merged_by: str, merged_at: datetime) -> bool:
        """Conditional draft -> merged update."""
        cur = await self._conn.execute(
            "UPDATE fork SET state = %s, merged_at = %s, merged_by = %s "
            "WHERE id = %s AND state = %s",
            (
                ForkState.MERGED.value,
                merged_at,
                merged_by,
                fork_id,
                ForkState.DRAFT.value,
            ),
        )
        return cur.rowcount == 1

    async def delete(self, fork_id: UUID) -> None:
        """Delete fork metadata."""
        await self._conn.execute("DELETE FROM fork WHERE id = %s", (fork_id,))
