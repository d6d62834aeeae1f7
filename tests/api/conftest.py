"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from termgate.application.use_cases.content.content_gate import ContentGate
from termgate.application.use_cases.content.get_content import GetContentUseCase
from termgate.application.use_cases.content.list_content import ListContentUseCase
from termgate.application.use_cases.restriction.get_term_restriction import (
    GetTermRestrictionUseCase,
)
from termgate.application.use_cases.restriction.save_term_restriction import (
    SaveTermRestrictionUseCase,
)
from termgate.application.use_cases.whitelist.add_whitelisted_user import (
    AddWhitelistedUserUseCase,
)
from termgate.application.use_cases.whitelist.remove_whitelisted_users import (
    RemoveWhitelistedUsersUseCase,
)
from termgate.application.use_cases.whitelist.search_users import SearchUsersUseCase
from termgate.domain.entities import ContentItem, Viewer
from termgate.interfaces.api.app import create_app
from termgate.interfaces.api.resources.ajax import AddUserResource, SearchUsersResource
from termgate.interfaces.api.resources.contents import ContentResource, ContentsResource
from termgate.interfaces.api.resources.health import HealthResource
from termgate.interfaces.api.resources.terms import (
    TermRestrictionResource,
    TermWhitelistResource,
)

from tests.conftest import BETA_TAG, FREE, PREMIUM


class ViewerHeaderMiddleware:
    """Sets context.viewer from X-Test-Role / X-Test-User headers for testing.

    No headers means anonymous; X-Test-Invalid simulates a rejected token.
    """

    async def process_request(self, req, resp):
        if req.get_header("X-Test-Invalid"):
            req.context.viewer = None
            return
        role = req.get_header("X-Test-Role")
        user = req.get_header("X-Test-User")
        if role and user:
            req.context.viewer = Viewer(role=role, user_id=int(user))
        else:
            req.context.viewer = Viewer.anonymous()


def as_viewer(role: str, user_id: int) -> dict[str, str]:
    return {"X-Test-Role": role, "X-Test-User": str(user_id)}


ADMIN_HEADERS = as_viewer("administrator", 1)
EDITOR_HEADERS = as_viewer("editor", 8)
SUBSCRIBER_HEADERS = as_viewer("subscriber", 7)


@pytest.fixture
def app(fake_uow, uow_factory, store, access_checker, capability_checker, scope):
    """Falcon ASGI app wired to in-memory repositories."""
    terms = fake_uow.terms._by_id
    fake_uow.contents.add_item(
        ContentItem(1, "download", "Premium Pack", "secret", [terms[PREMIUM]])
    )
    fake_uow.contents.add_item(ContentItem(2, "download", "Free Pack", "open", [terms[FREE]]))
    fake_uow.contents.add_item(
        ContentItem(3, "download", "Beta Build", "beta", [terms[FREE], terms[BETA_TAG]])
    )

    gate = ContentGate(access_checker, "Restricted content.")
    deps = {
        "unit_of_work_factory": uow_factory,
        "store": store,
        "capability_checker": capability_checker,
        "scope": scope,
    }
    return create_app(
        contents_resource=ContentsResource(ListContentUseCase(uow_factory, gate)),
        content_resource=ContentResource(GetContentUseCase(uow_factory, gate)),
        term_restriction_resource=TermRestrictionResource(
            GetTermRestrictionUseCase(**deps), SaveTermRestrictionUseCase(**deps)
        ),
        term_whitelist_resource=TermWhitelistResource(RemoveWhitelistedUsersUseCase(**deps)),
        search_users_resource=SearchUsersResource(SearchUsersUseCase(**deps)),
        add_user_resource=AddUserResource(AddWhitelistedUserUseCase(**deps)),
        health_resource=HealthResource(),
        middleware=[ViewerHeaderMiddleware()],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
