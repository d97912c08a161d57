"""Application entry point and composition root."""

import argparse
import logging

import falcon
import falcon.asgi

from docfork import __version__
from docfork.application.services.fork_manager import ForkManager
from docfork.application.use_cases.document.get_document import GetDocumentUseCase
from docfork.application.use_cases.fork.compare_fork import CompareForkUseCase
from docfork.application.use_cases.fork.create_fork import CreateForkUseCase
from docfork.application.use_cases.fork.get_fork import GetForkUseCase, ListForksUseCase
from docfork.application.use_cases.fork.merge_fork import MergeForkUseCase
from docfork.application.use_cases.fork.update_fork import UpdateForkUseCase
from docfork.config import Settings, get_settings
from docfork.infrastructure.auth.keycloak_provider import KeycloakProvider
from docfork.infrastructure.persistence.postgres.connection import check_pool, create_pool
from docfork.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from docfork.interfaces.api.app import create_app
from docfork.interfaces.api.middleware.auth import AuthMiddleware
from docfork.interfaces.api.middleware.cors import CORSMiddleware
from docfork.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from docfork.interfaces.api.resources.documents import DocumentResource
from docfork.interfaces.api.resources.forks import (
    DocumentForksResource,
    ForkCompareResource,
    ForkMergeResource,
    ForkResource,
    ForksResource,
)
from docfork.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_docfork_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    fork_manager = ForkManager(
        forkable_kinds=settings.forkable_kind_list,
        disposal_policy=settings.merge_action,
    )
    create_fork = CreateForkUseCase(unit_of_work_factory=uow_factory, fork_manager=fork_manager)
    merge_fork = MergeForkUseCase(
        unit_of_work_factory=uow_factory,
        fork_manager=fork_manager,
        strict_empty_base=settings.strict_empty_base,
        document_url_template=settings.document_url_template,
    )
    compare_fork = CompareForkUseCase(unit_of_work_factory=uow_factory)
    get_fork = GetForkUseCase(unit_of_work_factory=uow_factory)
    list_forks = ListForksUseCase(unit_of_work_factory=uow_factory)
    update_fork = UpdateForkUseCase(unit_of_work_factory=uow_factory)
    get_document = GetDocumentUseCase(unit_of_work_factory=uow_factory)

    async def readiness() -> bool:
        return await check_pool(pool)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = create_app(
        health_resource=HealthResource(readiness),
        document_resource=DocumentResource(get_document),
        document_forks_resource=DocumentForksResource(create_fork),
        forks_resource=ForksResource(list_forks),
        fork_resource=ForkResource(get_fork, update_fork),
        fork_compare_resource=ForkCompareResource(compare_fork),
        fork_merge_resource=ForkMergeResource(merge_fork),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    return app


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    import uvicorn

    parser = argparse.ArgumentParser(description=f"docfork v{__version__}")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("docfork v%s (%s)", __version__, settings.environment)
    uvicorn.run(create_docfork_app(settings), host=args.host, port=args.port)
