"""Application ports - interfaces for external adapters."""

from termgate.application.ports.access_checker import AccessChecker, AccessDecision
from termgate.application.ports.capability_checker import CapabilityChecker
from termgate.application.ports.term_restriction_store import TermRestrictionStore
from termgate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccessChecker",
    "AccessDecision",
    "CapabilityChecker",
    "TermRestrictionStore",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
