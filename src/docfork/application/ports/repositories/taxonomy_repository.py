"""Taxonomy repository port - category and tag assignments."""

from typing import Protocol
from uuid import UUID


class TaxonomyRepository(Protocol):
    """Port for taxonomy term assignments of documents."""

    async def list_taxonomies(self, document_id: UUID) -> list[str]: ...

    async def get_terms(self, document_id: UUID, taxonomy: str) -> set[str]: ...

    async def set_terms(
        self, document_id: UUID, taxonomy: str, term_ids: set[str]
    ) -> None: ...

    async def delete_by_document(self, document_id: UUID) -> None: ...
