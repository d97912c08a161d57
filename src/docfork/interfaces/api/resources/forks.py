"""Fork API resources - create, edit, compare and merge forks."""

from uuid import UUID

import falcon.asgi

from docfork.application.dto.comparison_dto import ComparisonView
from docfork.application.dto.fork_dto import ForkOutput, ForkUpdateInput
from docfork.application.dto.merge_dto import MergeResult
from docfork.application.use_cases.fork.compare_fork import CompareForkUseCase
from docfork.application.use_cases.fork.create_fork import CreateForkUseCase
from docfork.application.use_cases.fork.get_fork import GetForkUseCase, ListForksUseCase
from docfork.application.use_cases.fork.merge_fork import MergeForkUseCase
from docfork.application.use_cases.fork.update_fork import UpdateForkUseCase
from docfork.domain.exceptions import DocForkError
from docfork.domain.value_objects import ForkState, MergeField
from docfork.interfaces.api.resources.errors import set_error, set_unauthorized


def _parse_uuid(value: str, resp: falcon.asgi.Response, what: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": f"Invalid {what}"}
        return None


class DocumentForksResource:
    """POST /v1/documents/{document_id}/forks - fork a document."""

    def __init__(self, create_fork: CreateForkUseCase) -> None:
        self._create_fork = create_fork

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            set_unauthorized(resp)
            return

        original_id = _parse_uuid(document_id, resp, "document ID")
        if not original_id:
            return

        try:
            fork = await self._create_fork.execute(user, original_id)
            resp.media = _fork_to_dict(fork)
            resp.status = falcon.HTTP_201
        except DocForkError as e:
            set_error(resp, e)


class ForksResource:
    """GET /v1/forks - list forks."""

    def __init__(self, list_forks: ListForksUseCase) -> None:
        self._list_forks = list_forks

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List forks, filtered by original_id and state."""
        if not getattr(req.context, "user", None):
            set_unauthorized(resp)
            return

        original_id = None
        if req.get_param("original_id"):
            original_id = _parse_uuid(req.get_param("original_id"), resp, "original_id")
            if not original_id:
                return
        try:
            state = ForkState(req.get_param("state")) if req.get_param("state") else None
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "state must be draft or merged"}
            return

        cursor = req.get_param("cursor")
        limit = req.get_param_as_int("limit") or 20
        limit = min(max(limit, 1), 100)

        try:
            forks, next_cursor = await self._list_forks.execute(
                original_id=original_id,
                state=state,
                cursor=cursor,
                limit=limit,
            )
        except DocForkError as e:
            set_error(resp, e)
            return
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid cursor"}
            return

        resp.media = {
            "items": [_fork_to_dict(f, include_content=False) for f in forks],
            "next_cursor": next_cursor,
        }
        resp.status = falcon.HTTP_200


class ForkResource:
    """GET/PATCH /v1/forks/{fork_id} - read and edit a fork."""

    def __init__(self, get_fork: GetForkUseCase, update_fork: UpdateForkUseCase) -> None:
        self._get_fork = get_fork
        self._update_fork = update_fork

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        fork_id: str,
    ) -> None:
        if not getattr(req.context, "user", None):
            set_unauthorized(resp)
            return

        fid = _parse_uuid(fork_id, resp, "fork ID")
        if not fid:
            return

        try:
            fork = await self._get_fork.execute(fid)
            resp.media = _fork_to_dict(fork)
            resp.status = falcon.HTTP_200
        except DocForkError as e:
            set_error(resp, e)

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        fork_id: str,
    ) -> None:
        """Edit title, content and/or excerpt of a draft fork."""
        user = getattr(req.context, "user", None)
        if not user:
            set_unauthorized(resp)
            return

        fid = _parse_uuid(fork_id, resp, "fork ID")
        if not fid:
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "JSON object required"}
            return
        values = {f.value: body.get(f.value) for f in MergeField}
        if any(v is not None and not isinstance(v, str) for v in values.values()):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "title, content and excerpt must be strings"}
            return

        try:
            fork = await self._update_fork.execute(user, fid, ForkUpdateInput(**values))
            resp.media = _fork_to_dict(fork)
            resp.status = falcon.HTTP_200
        except DocForkError as e:
            set_error(resp, e)


class ForkCompareResource:
    """GET /v1/forks/{fork_id}/compare - side-by-side view with the original."""

    def __init__(self, compare_fork: CompareForkUseCase) -> None:
        self._compare_fork = compare_fork

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        fork_id: str,
    ) -> None:
        if not getattr(req.context, "user", None):
            set_unauthorized(resp)
            return

        fid = _parse_uuid(fork_id, resp, "fork ID")
        if not fid:
            return

        try:
            view = await self._compare_fork.execute(fid)
            resp.media = _comparison_to_dict(view)
            resp.status = falcon.HTTP_200
        except DocForkError as e:
            set_error(resp, e)


class ForkMergeResource:
    """POST /v1/forks/{fork_id}/merge - merge a fork into its original."""

    def __init__(self, merge_fork: MergeForkUseCase) -> None:
        self._merge_fork = merge_fork

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        fork_id: str,
    ) -> None:
        """Merge fork. Body: {"original_id": "..."}. Conflicts still return 200."""
        user = getattr(req.context, "user", None)
        if not user:
            set_unauthorized(resp)
            return

        body = await req.get_media()
        raw_original_id = body.get("original_id") if isinstance(body, dict) else None
        try:
            if not isinstance(raw_original_id, str):
                raise ValueError(raw_original_id)
            fid = UUID(fork_id)
            original_id = UUID(raw_original_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid fork or original document ID."}
            return

        try:
            result = await self._merge_fork.execute(user, fid, original_id)
            resp.media = _merge_result_to_dict(result)
            resp.status = falcon.HTTP_200
        except DocForkError as e:
            set_error(resp, e)


def _fork_to_dict(f: ForkOutput, include_content: bool = True) -> dict:
    data = {
        "id": str(f.id),
        "original_id": str(f.original_id),
        "original_kind": f.original_kind,
        "state": f.state.value,
        "title": f.title,
        "created_at": f.created_at.isoformat(),
        "modified_at": f.modified_at.isoformat(),
        "created_by": f.created_by,
        "merged_at": f.merged_at.isoformat() if f.merged_at else None,
        "merged_by": f.merged_by,
        "locked": f.locked,
    }
    if include_content:
        data["content"] = f.content
        data["excerpt"] = f.excerpt
        data["base"] = f.base
    return data


def _comparison_to_dict(v: ComparisonView) -> dict:
    return {
        "fork_id": str(v.fork_id),
        "original_id": str(v.original_id),
        "fields": [
            {
                "field": c.field.value,
                "original": c.original_value,
                "fork": c.fork_value,
                "changed": c.changed,
            }
            for c in v.fields
        ],
        "has_changes": v.has_changes,
        "original_modified_at": v.original_modified_at.isoformat(),
        "fork_modified_at": v.fork_modified_at.isoformat(),
    }


def _merge_result_to_dict(r: MergeResult) -> dict:
    return {
        "success": r.success,
        "has_conflicts": r.has_conflicts,
        "conflicts": [
            {
                "field": c.field.value,
                "message": c.message,
                "base": c.base,
                "original": c.original,
                "fork": c.fork,
                "resolution": c.resolution,
            }
            for c in r.conflicts
        ],
        "original_id": str(r.original_id),
        "original_url": r.original_url,
        "message": r.message,
    }
