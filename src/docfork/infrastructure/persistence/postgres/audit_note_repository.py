"""PostgreSQL audit note repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from docfork.domain.entities import AuditNote


class PostgresAuditNoteRepository:
    """Audit note repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def add(self, note: AuditNote) -> AuditNote:
        """Attach a note to a document."""
        await self._conn.execute(
            "INSERT INTO audit_note (id, document_id, author_id, author_name, author_email, "
            "note_type, content, created_at) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                note.id,
                note.document_id,
                note.author_id,
                note.author_name,
                note.author_email,
                note.note_type,
                note.content,
                note.created_at,
            ),
        )
        return note

    async def list_by_document(self, document_id: UUID) -> list[AuditNote]:
        """List notes of a document in creation order."""
        cur = await self._conn.execute(
            "SELECT id, document_id, author_id, content, created_at, note_type, "
            "author_name, author_email FROM audit_note WHERE document_id = %s "
            "ORDER BY created_at",
            (document_id,),
        )
        return [
            AuditNote(
                id=r[0],
                document_id=r[1],
                author_id=r[2],
                content=r[3],
                created_at=r[4],
                note_type=r[5],
                author_name=r[6],
                author_email=r[7],
            )
            for r in await cur.fetchall()
        ]
