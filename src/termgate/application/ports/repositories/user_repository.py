"""User directory repository port."""

from collections.abc import Iterable
from typing import Protocol

from termgate.domain.entities import User


class UserRepository(Protocol):
    """Port for reading the host user directory."""

    async def get_by_id(self, user_id: int) -> User | None: ...

    async def get_by_login(self, login: str) -> User | None: ...

    async def get_many(self, user_ids: Iterable[int]) -> list[User]: ...

    async def search(self, query: str, limit: int = 20) -> list[User]: ...
