"""Shared checks for admin use cases."""

from termgate.application.ports import CapabilityChecker, UnitOfWork
from termgate.domain.entities import TaxonomyTerm, Viewer
from termgate.domain.exceptions import NotFound, PermissionDenied
from termgate.domain.value_objects import AccessScope


def require_manager(capability_checker: CapabilityChecker, actor: Viewer) -> None:
    """Raise PermissionDenied unless actor may manage term restrictions."""
    if not capability_checker.can_manage(actor):
        raise PermissionDenied("User cannot manage term restrictions")


async def get_managed_term(
    uow: UnitOfWork, scope: AccessScope, taxonomy: str, term_id: int
) -> TaxonomyTerm:
    """Load term of a managed taxonomy or raise NotFound."""
    if not scope.manages_taxonomy(taxonomy):
        raise NotFound("Taxonomy", taxonomy)
    term = await uow.terms.get_in_taxonomy(taxonomy, term_id)
    if not term:
        raise NotFound("Term", f"{taxonomy}/{term_id}")
    return term
