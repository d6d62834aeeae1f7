"""Term restriction entity - access rule attached to a taxonomy term."""

from dataclasses import dataclass, field

from termgate.domain.entities.viewer import ANONYMOUS_ROLE, Viewer


@dataclass(frozen=True)
class TermRestriction:
    """Restriction settings for one taxonomy term.

    An inactive restriction imposes nothing. An active one admits viewers
    whose role is allowed or whose user id is whitelisted; with neither
    roles nor users configured it admits nobody.
    """

    term_id: int
    active: bool = False
    allowed_roles: frozenset[str] = field(default_factory=frozenset)
    whitelisted_users: tuple[int, ...] = ()
    denial_message: str = ""

    def permits(self, viewer: Viewer) -> bool:
        """Check a single restriction against a viewer (bypass not considered)."""
        if not self.active:
            return True
        if viewer.user_id is not None and viewer.user_id in self.whitelisted_users:
            return True
        role = ANONYMOUS_ROLE if viewer.is_anonymous else viewer.role
        return role in self.allowed_roles
