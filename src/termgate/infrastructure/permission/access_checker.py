"""Access decision engine - evaluates term restrictions against a viewer."""

import logging
from collections.abc import Iterable, Sequence

from termgate.application.ports import AccessDecision, CapabilityChecker, TermRestrictionStore
from termgate.domain.entities import ContentItem, TermRestriction, Viewer
from termgate.domain.value_objects import AccessScope

logger = logging.getLogger(__name__)


class TermAccessChecker:
    """Decides visibility of content items from their restricted terms.

    Only terms of managed taxonomies on items of managed content types are
    considered. The viewer must pass every active restriction attached to
    the item; a single failing term hides it.
    """

    def __init__(
        self,
        store: TermRestrictionStore,
        capability_checker: CapabilityChecker,
        scope: AccessScope,
    ) -> None:
        self._store = store
        self._capabilities = capability_checker
        self._scope = scope

    def _managed_term_ids(self, item: ContentItem) -> list[int]:
        if not self._scope.manages_content_type(item.content_type):
            return []
        return [t.id for t in item.terms if self._scope.manages_taxonomy(t.taxonomy)]

    def _evaluate(
        self,
        item: ContentItem,
        viewer: Viewer,
        restrictions: dict[int, TermRestriction],
    ) -> AccessDecision:
        active = [
            restrictions[t]
            for t in dict.fromkeys(self._managed_term_ids(item))
            if restrictions[t].active
        ]
        if not active:
            return AccessDecision(allowed=True)

        if self._capabilities.can_bypass(viewer):
            return AccessDecision(allowed=True)

        for restriction in active:
            if not restriction.permits(viewer):
                logger.debug(
                    "Denied item %s to viewer %s/%s by term %s",
                    item.id,
                    viewer.role,
                    viewer.user_id,
                    restriction.term_id,
                )
                return AccessDecision(allowed=False, denied_by=restriction)
        return AccessDecision(allowed=True)

    async def _load(self, term_ids: Iterable[int]) -> dict[int, TermRestriction]:
        ids = list(term_ids)
        if not ids:
            return {}
        return {r.term_id: r for r in await self._store.get_many(ids)}

    async def decide(self, item: ContentItem, viewer: Viewer) -> AccessDecision:
        """Evaluate all active restrictions on the item."""
        restrictions = await self._load(self._managed_term_ids(item))
        return self._evaluate(item, viewer, restrictions)

    async def decide_many(
        self, items: Sequence[ContentItem], viewer: Viewer
    ) -> list[AccessDecision]:
        """Evaluate several items, loading their restrictions in one read."""
        term_ids = (t for item in items for t in self._managed_term_ids(item))
        restrictions = await self._load(dict.fromkeys(term_ids))
        return [self._evaluate(item, viewer, restrictions) for item in items]

    async def can_view(self, item: ContentItem, viewer: Viewer) -> bool:
        """Check if viewer may see the item."""
        decision = await self.decide(item, viewer)
        return decision.allowed
