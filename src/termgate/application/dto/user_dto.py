"""User DTOs for whitelist management."""

import hashlib
from dataclasses import dataclass

from termgate.domain.entities import User
from termgate.domain.value_objects import WhitelistOutcome

GRAVATAR_URL = "https://secure.gravatar.com/avatar/{digest}?s={size}&d=mm"


def avatar_url(email: str, size: int = 32) -> str:
    """Gravatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return GRAVATAR_URL.format(digest=digest, size=size)


@dataclass
class UserSummary:
    """Display-ready user row."""

    id: int
    name: str
    email: str
    role: str
    avatar_url: str

    @classmethod
    def from_user(cls, user: User, role_label: str | None = None) -> "UserSummary":
        return cls(
            id=user.id,
            name=user.display_name or user.login,
            email=user.email,
            role=role_label or user.role,
            avatar_url=avatar_url(user.email),
        )


@dataclass
class UserCandidate(UserSummary):
    """User search result; disabled when already on the term whitelist."""

    disabled: bool = False


@dataclass
class WhitelistAddResult:
    """Result of resolve-and-add on a term whitelist."""

    outcome: WhitelistOutcome
    user: UserSummary

    @property
    def added(self) -> bool:
        return self.outcome is WhitelistOutcome.ADDED
