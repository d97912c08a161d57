"""Document repository port."""

from collections.abc import Mapping
from datetime import datetime
from typing import Protocol
from uuid import UUID

from docfork.domain.entities import Document
from docfork.domain.value_objects import MergeField


class DocumentRepository(Protocol):
    """Port for document persistence."""

    async def get_by_id(
        self, document_id: UUID, include_deleted: bool = False
    ) -> Document | None: ...

    async def create(self, document: Document) -> Document: ...

    async def update_fields(
        self,
        document_id: UUID,
        fields: Mapping[MergeField, str],
        modified_at: datetime,
    ) -> None: ...

    async def soft_delete(self, document_id: UUID) -> None: ...

    async def hard_delete(self, document_id: UUID) -> None: ...
