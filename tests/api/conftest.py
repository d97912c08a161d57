"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from docfork.application.use_cases.document.get_document import GetDocumentUseCase
from docfork.application.use_cases.fork.compare_fork import CompareForkUseCase
from docfork.application.use_cases.fork.create_fork import CreateForkUseCase
from docfork.application.use_cases.fork.get_fork import GetForkUseCase, ListForksUseCase
from docfork.application.use_cases.fork.merge_fork import MergeForkUseCase
from docfork.application.use_cases.fork.update_fork import UpdateForkUseCase
from docfork.domain.value_objects import Actor
from docfork.interfaces.api.app import create_app
from docfork.interfaces.api.resources.documents import DocumentResource
from docfork.interfaces.api.resources.forks import (
    DocumentForksResource,
    ForkCompareResource,
    ForkMergeResource,
    ForkResource,
    ForksResource,
)
from docfork.interfaces.api.resources.health import HealthResource


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing."""

    def __init__(self, user: Actor | None) -> None:
        self._user = user

    async def process_request(self, req, resp):
        req.context.user = self._user


def _build_app(uow_factory, fork_manager, user: Actor | None):
    return create_app(
        health_resource=HealthResource(),
        document_resource=DocumentResource(GetDocumentUseCase(uow_factory)),
        document_forks_resource=DocumentForksResource(
            CreateForkUseCase(uow_factory, fork_manager)
        ),
        forks_resource=ForksResource(ListForksUseCase(uow_factory)),
        fork_resource=ForkResource(GetForkUseCase(uow_factory), UpdateForkUseCase(uow_factory)),
        fork_compare_resource=ForkCompareResource(CompareForkUseCase(uow_factory)),
        fork_merge_resource=ForkMergeResource(MergeForkUseCase(uow_factory, fork_manager)),
        middleware=[AuthBypassMiddleware(user)],
    )


@pytest.fixture
def client(uow_factory, fork_manager, actor) -> TestClient:
    """Falcon ASGI test client; all requests of a test share one fake UoW."""
    return TestClient(_build_app(uow_factory, fork_manager, actor))


@pytest.fixture
def anonymous_client(uow_factory, fork_manager) -> TestClient:
    """Client whose requests carry a rejected token."""
    return TestClient(_build_app(uow_factory, fork_manager, None))
