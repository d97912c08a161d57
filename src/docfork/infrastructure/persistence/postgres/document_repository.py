"""PostgreSQL document repository implementation."""

from collections.abc import Mapping
from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from docfork.domain.entities import Document
from docfork.domain.value_objects import DocumentStatus, MergeField

_COLUMNS = (
    "id, kind, title, content, excerpt, status, author_id, "
    "created_at, modified_at, deleted_at"
)


def _row_to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        kind=r[1],
        title=r[2],
        content=r[3],
        excerpt=r[4],
        status=DocumentStatus(r[5]),
        author_id=r[6],
        created_at=r[7],
        modified_at=r[8],
        deleted_at=r[9],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID, include_deleted: bool = False) -> Document | None:
        """Get document by id."""
        q = f"SELECT {_COLUMNS} FROM document WHERE id = %s"
        if not include_deleted:
            q += " AND deleted_at IS NULL"
        cur = await self._conn.execute(q, (document_id,))
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def create(self, document: Document) -> Document:
        """Create document."""
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.kind,
                document.title,
                document.content,
                document.excerpt,
                document.status.value,
                document.author_id,
                document.created_at,
                document.modified_at,
                document.deleted_at,
            ),
        )
        return document

    async def update_fields(
        self,
        document_id: UUID,
        fields: Mapping[MergeField, str],
        modified_at: datetime,
    ) -> None:
        """Update mergeable fields in a single statement."""
        # Column names come from MergeField, never from input.
        assignments = ", ".join(f"{MergeField(f).value} = %s" for f in fields)
        await self._conn.execute(
            f"UPDATE document SET {assignments}, modified_at = %s WHERE id = %s",
            (*fields.values(), modified_at, document_id),
        )

    async def soft_delete(self, document_id: UUID) -> None:
        """Trash document."""
        await self._conn.execute(
            "UPDATE document SET status = %s, deleted_at = NOW() WHERE id = %s",
            (DocumentStatus.TRASHED.value, document_id),
        )

    async def hard_delete(self, document_id: UUID) -> None:
        """Hard delete document (properties, terms, revisions cascade)."""
        await self._conn.execute("DELETE FROM document WHERE id = %s", (document_id,))
