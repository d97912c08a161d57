"""Document API resources."""

from uuid import UUID

import falcon.asgi

from docfork.application.dto.document_dto import DocumentOutput
from docfork.application.use_cases.document.get_document import GetDocumentUseCase
from docfork.domain.exceptions import NotFound, StoreError
from docfork.interfaces.api.resources.errors import set_error, set_unauthorized


class DocumentResource:
    """GET /v1/documents/{id} - get document with properties and terms."""

    def __init__(self, get_document: GetDocumentUseCase) -> None:
        self._get_document = get_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Get document by id."""
        if not getattr(req.context, "user", None):
            set_unauthorized(resp)
            return

        try:
            doc_id = UUID(document_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return

        try:
            result = await self._get_document.execute(doc_id)
            resp.media = _document_to_dict(result)
            resp.status = falcon.HTTP_200
        except (NotFound, StoreError) as e:
            set_error(resp, e)


def _document_to_dict(d: DocumentOutput) -> dict:
    return {
        "id": str(d.id),
        "kind": d.kind,
        "title": d.title,
        "content": d.content,
        "excerpt": d.excerpt,
        "status": d.status.value,
        "created_at": d.created_at.isoformat(),
        "modified_at": d.modified_at.isoformat(),
        "properties": d.properties,
        "terms": d.terms,
        "primary_image_id": d.primary_image_id,
    }
