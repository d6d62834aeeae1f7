"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from termgate.interfaces.api.resources.ajax import AddUserResource, SearchUsersResource
from termgate.interfaces.api.resources.contents import ContentResource, ContentsResource
from termgate.interfaces.api.resources.health import HealthResource
from termgate.interfaces.api.resources.terms import (
    TermRestrictionResource,
    TermWhitelistResource,
)

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer 500."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    contents_resource: ContentsResource,
    content_resource: ContentResource,
    term_restriction_resource: TermRestrictionResource,
    term_whitelist_resource: TermWhitelistResource,
    search_users_resource: SearchUsersResource,
    add_user_resource: AddUserResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/content/{content_type}", contents_resource)
    app.add_route("/v1/content/{content_type}/{item_id}", content_resource)
    app.add_route(
        "/v1/taxonomies/{taxonomy}/terms/{term_id}/restriction",
        term_restriction_resource,
    )
    app.add_route(
        "/v1/taxonomies/{taxonomy}/terms/{term_id}/whitelist",
        term_whitelist_resource,
    )
    app.add_route("/v1/ajax/search-users", search_users_resource)
    app.add_route("/v1/ajax/add-user", add_user_resource)
    return app
