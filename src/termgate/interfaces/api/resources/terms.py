"""Term restriction API resources - the term edit panel."""

import falcon.asgi

from termgate.application.dto.restriction_dto import TermRestrictionInput
from termgate.application.use_cases.restriction.get_term_restriction import (
    GetTermRestrictionUseCase,
)
from termgate.application.use_cases.restriction.save_term_restriction import (
    SaveTermRestrictionUseCase,
)
from termgate.application.use_cases.whitelist.remove_whitelisted_users import (
    RemoveWhitelistedUsersUseCase,
)
from termgate.domain.entities import TermRestriction
from termgate.domain.exceptions import NotFound, PermissionDenied
from termgate.interfaces.api.resources.params import parse_id, user_summary_media


def _restriction_media(restriction: TermRestriction) -> dict:
    return {
        "term_id": restriction.term_id,
        "active": restriction.active,
        "allowed_roles": sorted(restriction.allowed_roles),
        "whitelisted_users": list(restriction.whitelisted_users),
        "denial_message": restriction.denial_message,
    }


def _parse_restriction_body(body: object) -> TermRestrictionInput | None:
    if not isinstance(body, dict):
        return None
    active = body.get("active", False)
    roles = body.get("allowed_roles", [])
    users = body.get("whitelisted_users", [])
    message = body.get("denial_message", "")
    if not isinstance(active, bool) or not isinstance(message, str):
        return None
    if not isinstance(roles, list) or not all(isinstance(r, str) for r in roles):
        return None
    if not isinstance(users, list):
        return None
    user_ids = [parse_id(u) for u in users]
    if any(u is None for u in user_ids):
        return None
    return TermRestrictionInput(
        active=active,
        allowed_roles=roles,
        whitelisted_users=user_ids,
        denial_message=message,
    )


class TermRestrictionResource:
    """GET/PUT /v1/taxonomies/{taxonomy}/terms/{term_id}/restriction."""

    def __init__(
        self,
        get_restriction: GetTermRestrictionUseCase,
        save_restriction: SaveTermRestrictionUseCase,
    ) -> None:
        self._get = get_restriction
        self._save = save_restriction

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        taxonomy: str,
        term_id: str,
    ) -> None:
        """Restriction panel data for term."""
        viewer = getattr(req.context, "viewer", None)
        if not viewer:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        parsed_id = parse_id(term_id)
        if parsed_id is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid term ID"}
            return

        try:
            panel = await self._get.execute(viewer, taxonomy, parsed_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "term": {
                "id": panel.term.id,
                "taxonomy": panel.term.taxonomy,
                "name": panel.term.name,
                "slug": panel.term.slug,
            },
            "restriction": _restriction_media(panel.restriction),
            "roles": [{"slug": r.slug, "label": r.label} for r in panel.roles],
            "whitelisted_users": [user_summary_media(u) for u in panel.whitelisted_users],
        }
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        taxonomy: str,
        term_id: str,
    ) -> None:
        """Save restriction settings for term."""
        viewer = getattr(req.context, "viewer", None)
        if not viewer:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        parsed_id = parse_id(term_id)
        if parsed_id is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid term ID"}
            return

        try:
            body = await req.get_media(default_when_empty=None)
        except falcon.MediaMalformedError:
            body = None
        input_data = _parse_restriction_body(body)
        if input_data is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        try:
            restriction = await self._save.execute(viewer, taxonomy, parsed_id, input_data)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = _restriction_media(restriction)
        resp.status = falcon.HTTP_200


class TermWhitelistResource:
    """DELETE /v1/taxonomies/{taxonomy}/terms/{term_id}/whitelist?user_id=.. - remove users."""

    def __init__(self, remove_users: RemoveWhitelistedUsersUseCase) -> None:
        self._remove = remove_users

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        taxonomy: str,
        term_id: str,
    ) -> None:
        viewer = getattr(req.context, "viewer", None)
        if not viewer:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        parsed_term = parse_id(term_id)
        user_ids = [parse_id(u) for u in req.get_param_as_list("user_id") or []]
        if parsed_term is None or not user_ids or any(u is None for u in user_ids):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid term or user IDs"}
            return

        try:
            await self._remove.execute(viewer, taxonomy, parsed_term, user_ids)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.status = falcon.HTTP_204
