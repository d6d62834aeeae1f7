"""Auth middleware - resolves the viewer from a bearer token or anonymous."""

import logging

import falcon.asgi

from termgate.domain.entities import Viewer

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """Middleware that validates the token and sets req.context.viewer.

    No Authorization header means an anonymous viewer. An invalid token
    leaves req.context.viewer as None. Valid tokens for logins unknown to
    the user directory are treated as anonymous.
    """

    def __init__(self, unit_of_work_factory: type, keycloak_provider=None) -> None:
        self._uow_factory = unit_of_work_factory
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract viewer from Authorization header."""
        auth = req.get_header("Authorization")
        if not auth:
            req.context.viewer = Viewer.anonymous()
            return

        req.context.viewer = None
        if not auth.startswith("Bearer ") or not self._keycloak:
            return

        oidc_user = self._keycloak.decode_token(auth[7:])
        if not oidc_user:
            return
        if not oidc_user.username:
            req.context.viewer = Viewer.anonymous()
            return

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_login(oidc_user.username)
        if not user:
            logger.info("Token user %s not in directory; treating as anonymous", oidc_user.username)
            req.context.viewer = Viewer.anonymous()
            return
        req.context.viewer = Viewer(role=user.role, user_id=user.id)
