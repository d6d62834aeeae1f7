"""Unit tests for AuthMiddleware viewer resolution."""

import falcon
import falcon.asgi
import pytest
from falcon.testing import TestClient

from termgate.infrastructure.auth.keycloak_provider import OIDCUser
from termgate.interfaces.api.middleware.auth import AuthMiddleware


class FakeKeycloak:
    """Accepts tokens of the form 'valid:<username>'."""

    def decode_token(self, token: str) -> OIDCUser | None:
        if not token.startswith("valid:"):
            return None
        username = token[len("valid:") :] or None
        return OIDCUser(subject="sub-1", username=username, email=None)


class EchoViewerResource:
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        viewer = req.context.viewer
        resp.media = {
            "viewer": None
            if viewer is None
            else {"role": viewer.role, "user_id": viewer.user_id}
        }


def _client(uow_factory, keycloak) -> TestClient:
    app = falcon.asgi.App(middleware=[AuthMiddleware(uow_factory, keycloak)])
    app.add_route("/whoami", EchoViewerResource())
    return TestClient(app)


@pytest.fixture
def client(uow_factory) -> TestClient:
    return _client(uow_factory, FakeKeycloak())


def test_no_header_is_anonymous(client: TestClient) -> None:
    r = client.simulate_get("/whoami")
    assert r.json["viewer"] == {"role": "anonymous", "user_id": None}


def test_valid_token_resolves_directory_user(client: TestClient) -> None:
    r = client.simulate_get("/whoami", headers={"Authorization": "Bearer valid:annalee"})
    assert r.json["viewer"] == {"role": "subscriber", "user_id": 7}


def test_unknown_login_is_anonymous(client: TestClient) -> None:
    r = client.simulate_get("/whoami", headers={"Authorization": "Bearer valid:stranger"})
    assert r.json["viewer"] == {"role": "anonymous", "user_id": None}


def test_invalid_token_has_no_viewer(client: TestClient) -> None:
    r = client.simulate_get("/whoami", headers={"Authorization": "Bearer garbage"})
    assert r.json["viewer"] is None


def test_non_bearer_header_has_no_viewer(client: TestClient) -> None:
    r = client.simulate_get("/whoami", headers={"Authorization": "Basic abc"})
    assert r.json["viewer"] is None


def test_bearer_without_keycloak_has_no_viewer(uow_factory) -> None:
    r = _client(uow_factory, None).simulate_get(
        "/whoami", headers={"Authorization": "Bearer valid:annalee"}
    )
    assert r.json["viewer"] is None
