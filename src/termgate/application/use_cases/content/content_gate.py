"""Content gate - enforces term restrictions on content retrieval."""

from collections.abc import Iterable
from dataclasses import replace

from termgate.application.dto.content_dto import GatedContent
from termgate.application.ports import AccessChecker
from termgate.domain.entities import ContentItem, Viewer


class ContentGate:
    """Filters listings and substitutes a restricted view for single items.

    Every listing, search and single-item path goes through here, and each
    call re-evaluates access for the current viewer.
    """

    def __init__(self, access_checker: AccessChecker, default_denial_message: str) -> None:
        self._access_checker = access_checker
        self._default_message = default_denial_message

    async def filter_visible(
        self, items: Iterable[ContentItem], viewer: Viewer
    ) -> list[ContentItem]:
        """Drop items the viewer may not see, preserving order."""
        items = list(items)
        decisions = await self._access_checker.decide_many(items, viewer)
        return [item for item, decision in zip(items, decisions) if decision.allowed]

    async def resolve(self, item: ContentItem, viewer: Viewer) -> GatedContent:
        """Return the item, or its restricted view with the denial message."""
        decision = await self._access_checker.decide(item, viewer)
        if decision.allowed:
            return GatedContent(item=item)

        message = self._default_message
        if decision.denied_by and decision.denied_by.denial_message.strip():
            message = decision.denied_by.denial_message
        stripped = replace(item, body="", terms=[])
        return GatedContent(item=stripped, restricted=True, message=message)
