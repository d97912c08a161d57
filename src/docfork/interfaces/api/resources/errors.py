"""Mapping of domain errors to HTTP responses."""

import falcon
import falcon.asgi

from docfork.domain.exceptions import (
    AlreadyMerged,
    DocForkError,
    ForkLocked,
    InvalidFork,
    InvalidOriginal,
    Mismatch,
    NotFound,
    OriginalDeleted,
    StoreError,
    ValidationError,
)

_STATUS: dict[type[DocForkError], str] = {
    NotFound: falcon.HTTP_404,
    InvalidFork: falcon.HTTP_404,
    InvalidOriginal: falcon.HTTP_404,
    Mismatch: falcon.HTTP_409,
    AlreadyMerged: falcon.HTTP_409,
    ForkLocked: falcon.HTTP_409,
    OriginalDeleted: falcon.HTTP_410,
    ValidationError: falcon.HTTP_400,
    StoreError: falcon.HTTP_503,
}


def set_error(resp: falcon.asgi.Response, error: DocForkError) -> None:
    """Write a domain error as {"error": message} with its status code."""
    resp.status = _STATUS.get(type(error), falcon.HTTP_500)
    if isinstance(error, StoreError):
        resp.media = {"error": "Storage is temporarily unavailable"}
    else:
        resp.media = {"error": str(error)}


def set_unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}
