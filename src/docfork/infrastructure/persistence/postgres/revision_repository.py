"""PostgreSQL revision repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from docfork.domain.entities import Revision


class PostgresRevisionRepository:
    """Revision repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, revision: Revision) -> Revision:
        """Store a backup revision."""
        await self._conn.execute(
            "INSERT INTO document_revision (id, document_id, title, content, excerpt, created_at) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                revision.id,
                revision.document_id,
                revision.title,
                revision.content,
                revision.excerpt,
                revision.created_at,
            ),
        )
        return revision

    async def list_by_document(self, document_id: UUID) -> list[Revision]:
        """List revisions of a document, newest first."""
        cur = await self._conn.execute(
            "SELECT id, document_id, title, content, excerpt, created_at "
            "FROM document_revision WHERE document_id = %s ORDER BY created_at DESC",
            (document_id,),
        )
        return [
            Revision(
                id=r[0],
                document_id=r[1],
                title=r[2],
                content=r[3],
                excerpt=r[4],
                created_at=r[5],
            )
            for r in await cur.fetchall()
        ]
