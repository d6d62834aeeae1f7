"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from termgate.application.ports.repositories.content_repository import (
    ContentRepository,
)
from termgate.application.ports.repositories.role_repository import RoleRepository
from termgate.application.ports.repositories.term_meta_repository import (
    TermMetaRepository,
)
from termgate.application.ports.repositories.term_repository import TermRepository
from termgate.application.ports.repositories.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def term_meta(self) -> TermMetaRepository: ...

    @property
    def terms(self) -> TermRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def users(self) -> UserRepository: ...

    @property
    def contents(self) -> ContentRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
