"""Repository ports."""

from termgate.application.ports.repositories.content_repository import (
    ContentRepository,
)
from termgate.application.ports.repositories.role_repository import RoleRepository
from termgate.application.ports.repositories.term_meta_repository import (
    TermMetaRepository,
)
from termgate.application.ports.repositories.term_repository import TermRepository
from termgate.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "ContentRepository",
    "RoleRepository",
    "TermMetaRepository",
    "TermRepository",
    "UserRepository",
]
