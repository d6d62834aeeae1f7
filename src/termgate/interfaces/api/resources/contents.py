"""Content API resources - gated listing, search and single item."""

import falcon.asgi

from termgate.application.use_cases.content.get_content import GetContentUseCase
from termgate.application.use_cases.content.list_content import ListContentUseCase
from termgate.domain.entities import ContentItem
from termgate.domain.exceptions import NotFound
from termgate.interfaces.api.resources.params import parse_id


def _item_media(item: ContentItem) -> dict:
    return {
        "id": item.id,
        "content_type": item.content_type,
        "title": item.title,
        "body": item.body,
        "terms": [
            {"id": t.id, "taxonomy": t.taxonomy, "name": t.name, "slug": t.slug}
            for t in item.terms
        ],
    }


class ContentsResource:
    """GET /v1/content/{content_type} - list or search visible items."""

    def __init__(self, list_content: ListContentUseCase) -> None:
        self._list = list_content

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        content_type: str,
    ) -> None:
        """List items; restricted ones are left out."""
        viewer = getattr(req.context, "viewer", None)
        if not viewer:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        limit = req.get_param_as_int("limit", min_value=1, max_value=100, default=20)
        offset = req.get_param_as_int("offset", min_value=0, default=0)
        search = (req.get_param("search") or "").strip() or None

        items = await self._list.execute(
            viewer, content_type, search=search, limit=limit, offset=offset
        )
        resp.media = {"items": [_item_media(i) for i in items]}
        resp.status = falcon.HTTP_200


class ContentResource:
    """GET /v1/content/{content_type}/{item_id} - single item or restricted view."""

    def __init__(self, get_content: GetContentUseCase) -> None:
        self._get = get_content

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        content_type: str,
        item_id: str,
    ) -> None:
        viewer = getattr(req.context, "viewer", None)
        if not viewer:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        parsed_id = parse_id(item_id)
        if parsed_id is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid item ID"}
            return

        try:
            gated = await self._get.execute(viewer, content_type, parsed_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Content not found"}
            return

        if gated.restricted:
            resp.status = falcon.HTTP_403
            resp.media = {
                "id": gated.item.id,
                "content_type": gated.item.content_type,
                "title": gated.item.title,
                "restricted": True,
                "message": gated.message,
            }
            return

        resp.media = _item_media(gated.item)
        resp.status = falcon.HTTP_200
