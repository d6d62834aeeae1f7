"""Access checker port - decides whether a viewer may see a content item."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from termgate.domain.entities import ContentItem, TermRestriction, Viewer


@dataclass(frozen=True)
class AccessDecision:
    """Allow/deny result; denied_by is the first restriction the viewer failed."""

    allowed: bool
    denied_by: TermRestriction | None = None


class AccessChecker(Protocol):
    """Port for term-based content visibility decisions."""

    async def decide(self, item: ContentItem, viewer: Viewer) -> AccessDecision: ...

    async def decide_many(
        self, items: Sequence[ContentItem], viewer: Viewer
    ) -> list[AccessDecision]: ...

    async def can_view(self, item: ContentItem, viewer: Viewer) -> bool: ...
