"""Term restriction store backed by term metadata."""

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from termgate.domain.entities import ANONYMOUS_ROLE, TermRestriction
from termgate.domain.value_objects import RestrictionMetaKey

logger = logging.getLogger(__name__)

_KEYS = tuple(k.value for k in RestrictionMetaKey)


def _coerce_roles(value: Any) -> frozenset[str]:
    if not isinstance(value, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(r for r in value if isinstance(r, str) and r)


def _coerce_user_ids(value: Any) -> tuple[int, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    seen: dict[int, None] = {}
    for raw in value:
        if isinstance(raw, bool):
            continue
        try:
            user_id = int(raw)
        except (TypeError, ValueError):
            continue
        if user_id > 0:
            seen.setdefault(user_id, None)
    return tuple(seen)


def restriction_from_meta(term_id: int, meta: dict[str, Any]) -> TermRestriction:
    """Build a TermRestriction from stored meta values, defaulting missing keys."""
    message = meta.get(RestrictionMetaKey.MESSAGE)
    return TermRestriction(
        term_id=term_id,
        active=meta.get(RestrictionMetaKey.ACTIVE) is True,
        allowed_roles=_coerce_roles(meta.get(RestrictionMetaKey.ROLES)),
        whitelisted_users=_coerce_user_ids(meta.get(RestrictionMetaKey.WHITELIST)),
        denial_message=message if isinstance(message, str) else "",
    )


def restriction_to_meta(restriction: TermRestriction) -> dict[str, Any]:
    """Serialize a TermRestriction to meta values (JSON-compatible)."""
    return {
        RestrictionMetaKey.ACTIVE.value: restriction.active,
        RestrictionMetaKey.ROLES.value: sorted(restriction.allowed_roles),
        RestrictionMetaKey.WHITELIST.value: list(restriction.whitelisted_users),
        RestrictionMetaKey.MESSAGE.value: restriction.denial_message,
    }


class TermMetaRestrictionStore:
    """Reads and writes term restrictions as term metadata rows.

    Each public method runs in its own unit of work, so a save is one
    transaction and readers never see a partially written restriction.
    Whitelist edits lock the whitelist row before reading it, so concurrent
    adds and removes apply one after another.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def get(self, term_id: int) -> TermRestriction:
        """Get restriction for term, or defaults when nothing is stored."""
        async with self._uow_factory() as uow:
            meta = await uow.term_meta.get_all(term_id, _KEYS)
        return restriction_from_meta(term_id, meta)

    async def get_many(self, term_ids: Iterable[int]) -> list[TermRestriction]:
        """Get restrictions for several terms, in input order."""
        ids = list(dict.fromkeys(term_ids))
        if not ids:
            return []
        async with self._uow_factory() as uow:
            meta_by_term = await uow.term_meta.get_for_terms(ids, _KEYS)
        return [restriction_from_meta(t, meta_by_term.get(t, {})) for t in ids]

    async def save(self, term_id: int, settings: TermRestriction) -> TermRestriction:
        """Save restriction. Unknown role slugs are dropped."""
        async with self._uow_factory() as uow:
            known = {r.slug for r in await uow.roles.list_all()}
            known.add(ANONYMOUS_ROLE)
            dropped = settings.allowed_roles - known
            if dropped:
                logger.info(
                    "Dropping unknown roles %s for term %s", sorted(dropped), term_id
                )
            restriction = replace(
                settings,
                term_id=term_id,
                allowed_roles=settings.allowed_roles & known,
                whitelisted_users=_coerce_user_ids(list(settings.whitelisted_users)),
            )
            await uow.term_meta.set_many(term_id, restriction_to_meta(restriction))
        logger.info(
            "Saved restriction for term %s (active=%s, roles=%d, users=%d)",
            term_id,
            restriction.active,
            len(restriction.allowed_roles),
            len(restriction.whitelisted_users),
        )
        return restriction

    async def add_whitelisted_user(self, term_id: int, user_id: int) -> bool:
        """Append user to whitelist. Returns False if already present."""
        async with self._uow_factory() as uow:
            key = RestrictionMetaKey.WHITELIST.value
            users = _coerce_user_ids(await uow.term_meta.get_for_update(term_id, key, []))
            if user_id in users:
                return False
            await uow.term_meta.set_many(term_id, {key: [*users, user_id]})
        logger.info("Whitelisted user %s on term %s", user_id, term_id)
        return True

    async def remove_whitelisted_users(self, term_id: int, user_ids: Iterable[int]) -> None:
        """Remove users from whitelist; absent ids are ignored."""
        remove = set(user_ids)
        if not remove:
            return
        async with self._uow_factory() as uow:
            key = RestrictionMetaKey.WHITELIST.value
            users = _coerce_user_ids(await uow.term_meta.get_for_update(term_id, key, []))
            kept = [u for u in users if u not in remove]
            if len(kept) == len(users):
                return
            await uow.term_meta.set_many(term_id, {key: kept})
        logger.info(
            "Removed %d whitelisted users from term %s", len(users) - len(kept), term_id
        )
