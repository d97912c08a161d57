"""PostgreSQL taxonomy repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection


class PostgresTaxonomyRepository:
    """Taxonomy term assignments stored in document_term."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_taxonomies(self, document_id: UUID) -> list[str]:
        """List taxonomies the document has terms in."""
        cur = await self._conn.execute(
            "SELECT DISTINCT taxonomy FROM document_term WHERE document_id = %s ORDER BY taxonomy",
            (document_id,),
        )
        return [r[0] for r in await cur.fetchall()]

    async def get_terms(self, document_id: UUID, taxonomy: str) -> set[str]:
        """Get term ids of one taxonomy."""
        cur = await self._conn.execute(
            "SELECT term_id FROM document_term WHERE document_id = %s AND taxonomy = %s",
            (document_id, taxonomy),
        )
        return {r[0] for r in await cur.fetchall()}

    async def set_terms(self, document_id: UUID, taxonomy: str, term_ids: set[str]) -> None:
        """Replace term ids of one taxonomy. An empty set clears it."""
        await self._conn.execute(
            "DELETE FROM document_term WHERE document_id = %s AND taxonomy = %s",
            (document_id, taxonomy),
        )
        if not term_ids:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO document_term (document_id, taxonomy, term_id) VALUES (%s, %s, %s)",
                [(document_id, taxonomy, t) for t in sorted(term_ids)],
            )

    async def delete_by_document(self, document_id: UUID) -> None:
        """Delete all term assignments for document."""
        await self._conn.execute(
            "DELETE FROM document_term WHERE document_id = %s",
            (document_id,),
        )
