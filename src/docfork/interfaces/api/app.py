"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from docfork.interfaces.api.resources.documents import DocumentResource
from docfork.interfaces.api.resources.forks import (
    DocumentForksResource,
    ForkCompareResource,
    ForkMergeResource,
    ForkResource,
    ForksResource,
)
from docfork.interfaces.api.resources.health import HealthResource


def create_app(
    *,
    health_resource: HealthResource,
    document_resource: DocumentResource,
    document_forks_resource: DocumentForksResource,
    forks_resource: ForksResource,
    fork_resource: ForkResource,
    fork_compare_resource: ForkCompareResource,
    fork_merge_resource: ForkMergeResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/documents/{document_id}", document_resource)
    app.add_route("/v1/documents/{document_id}/forks", document_forks_resource)
    app.add_route("/v1/forks", forks_resource)
    app.add_route("/v1/forks/{fork_id}", fork_resource)
    app.add_route("/v1/forks/{fork_id}/compare", fork_compare_resource)
    app.add_route("/v1/forks/{fork_id}/merge", fork_merge_resource)
    return app
