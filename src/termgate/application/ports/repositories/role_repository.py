"""Role repository port."""

from typing import Protocol

from termgate.domain.entities import Role


class RoleRepository(Protocol):
    """Port for reading host roles."""

    async def get_by_slug(self, slug: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...
