"""AJAX endpoints backing the whitelist user picker."""

import falcon.asgi

from termgate.application.use_cases.whitelist.add_whitelisted_user import (
    AddWhitelistedUserUseCase,
)
from termgate.application.use_cases.whitelist.search_users import SearchUsersUseCase
from termgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from termgate.interfaces.api.resources.params import parse_id, user_summary_media


class SearchUsersResource:
    """GET /v1/ajax/search-users?q=..[&taxonomy=..&term_id=..] - whitelist candidates."""

    def __init__(self, search_users: SearchUsersUseCase) -> None:
        self._search = search_users

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        viewer = getattr(req.context, "viewer", None)
        if not viewer:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        query = req.get_param("q") or req.get_param("query") or ""
        taxonomy = req.get_param("taxonomy")
        raw_term = req.get_param("term_id")
        term_id = None
        if raw_term is not None:
            term_id = parse_id(raw_term)
            if term_id is None or not taxonomy:
                resp.status = falcon.HTTP_400
                resp.media = {"error": "Invalid taxonomy or term ID"}
                return

        try:
            candidates = await self._search.execute(
                viewer, query, taxonomy if term_id else None, term_id
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = [
            {**user_summary_media(c), "disabled": c.disabled} for c in candidates
        ]
        resp.status = falcon.HTTP_200


class AddUserResource:
    """POST /v1/ajax/add-user {user_id, taxonomy, term_id} - add user to whitelist."""

    def __init__(self, add_user: AddWhitelistedUserUseCase) -> None:
        self._add = add_user

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        viewer = getattr(req.context, "viewer", None)
        if not viewer:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media(default_when_empty=None)
        except falcon.MediaMalformedError:
            body = None
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        user_id = parse_id(body.get("user_id"))
        term_id = parse_id(body.get("term_id"))
        taxonomy = body.get("taxonomy")
        if user_id is None or term_id is None or not isinstance(taxonomy, str) or not taxonomy:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "user_id, taxonomy and term_id are required"}
            return

        try:
            result = await self._add.execute(viewer, taxonomy, term_id, user_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        if not result.added:
            resp.media = {"already_present": True, "user_id": result.user.id}
            resp.status = falcon.HTTP_200
            return

        resp.media = {
            "user_id": result.user.id,
            "name": result.user.name,
            "role": result.user.role,
            "email": result.user.email,
            "avatar": result.user.avatar_url,
        }
        resp.status = falcon.HTTP_201
