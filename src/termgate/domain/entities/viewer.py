"""Viewer - the actor requesting content."""

from dataclasses import dataclass

ANONYMOUS_ROLE = "anonymous"


@dataclass(frozen=True)
class Viewer:
    """Requesting actor: primary role and user id (None when anonymous)."""

    role: str
    user_id: int | None = None

    @classmethod
    def anonymous(cls) -> "Viewer":
        return cls(role=ANONYMOUS_ROLE, user_id=None)

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None
