"""Property repository port - document key-value metadata."""

from typing import Protocol
from uuid import UUID

from docfork.domain.entities import Property


class PropertyRepository(Protocol):
    """Port for document property persistence.

    The primary image reference is stored as the reserved property
    ``_primary_image_id``.
    """

    async def list_by_document(self, document_id: UUID) -> list[Property]: ...

    async def create_batch(self, properties: list[Property]) -> None: ...

    async def delete_key(self, document_id: UUID, key: str) -> None: ...

    async def delete_by_document(self, document_id: UUID) -> None: ...

    async def get_primary_image(self, document_id: UUID) -> str | None: ...

    async def set_primary_image(self, document_id: UUID, image_id: str) -> None: ...
