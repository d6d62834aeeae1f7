"""Capability checker port - administrative capabilities of a viewer."""

from typing import Protocol

from termgate.domain.entities import Viewer


class CapabilityChecker(Protocol):
    """Port for bypass and manage capabilities."""

    def can_bypass(self, viewer: Viewer) -> bool: ...

    def can_manage(self, viewer: Viewer) -> bool: ...
