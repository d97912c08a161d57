"""Get document use case."""

from uuid import UUID

from docfork.application.dto.document_dto import DocumentOutput
from docfork.domain.exceptions import NotFound
from docfork.domain.value_objects.property_key import PRIMARY_IMAGE_KEY


class GetDocumentUseCase:
    """Get document by id with its properties and taxonomy terms."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> DocumentOutput:
        """Get document by id."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))

            properties: dict[str, list[str]] = {}
            for p in await uow.properties.list_by_document(document_id):
                if p.key != PRIMARY_IMAGE_KEY:
                    properties.setdefault(p.key, []).append(p.value)
            terms = {
                taxonomy: sorted(await uow.taxonomies.get_terms(document_id, taxonomy))
                for taxonomy in await uow.taxonomies.list_taxonomies(document_id)
            }
            primary_image_id = await uow.properties.get_primary_image(document_id)

        return DocumentOutput(
            id=document.id,
            kind=document.kind,
            title=document.title,
            content=document.content,
            excerpt=document.excerpt,
            status=document.status,
            created_at=document.created_at,
            modified_at=document.modified_at,
            properties=properties,
            terms=terms,
            primary_image_id=primary_image_id,
        )
