"""Role-based capability checker."""

from collections.abc import Iterable

from termgate.domain.entities import Viewer


class RoleCapabilityChecker:
    """Grants bypass and manage capabilities by role slug."""

    def __init__(self, bypass_roles: Iterable[str], manager_roles: Iterable[str]) -> None:
        self._bypass_roles = frozenset(bypass_roles)
        self._manager_roles = frozenset(manager_roles)

    def can_bypass(self, viewer: Viewer) -> bool:
        """Bypass-capable viewers pass every restriction."""
        return not viewer.is_anonymous and viewer.role in self._bypass_roles

    def can_manage(self, viewer: Viewer) -> bool:
        """Managers may edit term restrictions and whitelists."""
        return not viewer.is_anonymous and viewer.role in self._manager_roles
