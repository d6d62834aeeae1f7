"""Term restriction store port."""

from collections.abc import Iterable
from typing import Protocol

from termgate.domain.entities import TermRestriction


class TermRestrictionStore(Protocol):
    """Port for reading and writing per-term restriction settings."""

    async def get(self, term_id: int) -> TermRestriction: ...

    async def get_many(self, term_ids: Iterable[int]) -> list[TermRestriction]: ...

    async def save(self, term_id: int, settings: TermRestriction) -> TermRestriction: ...

    async def add_whitelisted_user(self, term_id: int, user_id: int) -> bool: ...

    async def remove_whitelisted_users(self, term_id: int, user_ids: Iterable[int]) -> None: ...
