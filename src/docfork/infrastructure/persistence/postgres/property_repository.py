"""PostgreSQL property repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from docfork.domain.entities import Property
from docfork.domain.value_objects.property_key import PRIMARY_IMAGE_KEY


class PostgresPropertyRepository:
    """Property repository implementation. Values keep insertion order."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_document(self, document_id: UUID) -> list[Property]:
        """List properties for document."""
        cur = await self._conn.execute(
            "SELECT document_id, key, value FROM document_property "
            "WHERE document_id = %s ORDER BY id",
            (document_id,),
        )
        rows = await cur.fetchall()
        return [Property(document_id=r[0], key=r[1], value=r[2]) for r in rows]

    async def create_batch(self, properties: list[Property]) -> None:
        """Create properties in batch."""
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO document_property (document_id, key, value) VALUES (%s, %s, %s)",
                [(p.document_id, p.key, p.value) for p in properties],
            )

    async def delete_key(self, document_id: UUID, key: str) -> None:
        """Delete all values of a key."""
        await self._conn.execute(
            "DELETE FROM document_property WHERE document_id = %s AND key = %s",
            (document_id, key),
        )

    async def delete_by_document(self, document_id: UUID) -> None:
        """Delete all properties for document."""
        await self._conn.execute(
            "DELETE FROM document_property WHERE document_id = %s",
            (document_id,),
        )

    async def get_primary_image(self, document_id: UUID) -> str | None:
        """Get primary image reference."""
        cur = await self._conn.execute(
            "SELECT value FROM document_property "
            "WHERE document_id = %s AND key = %s ORDER BY id LIMIT 1",
            (document_id, PRIMARY_IMAGE_KEY),
        )
        r = await cur.fetchone()
        return r[0] if r and r[0] else None

    async def set_primary_image(self, document_id: UUID, image_id: str) -> None:
        """Set primary image reference, replacing any previous one."""
        await self.delete_key(document_id, PRIMARY_IMAGE_KEY)
        await self._conn.execute(
            "INSERT INTO document_property (document_id, key, value) VALUES (%s, %s, %s)",
            (document_id, PRIMARY_IMAGE_KEY, image_id),
        )
