"""Term restriction DTOs."""

from dataclasses import dataclass, field

from termgate.application.dto.user_dto import UserSummary
from termgate.domain.entities import Role, TaxonomyTerm, TermRestriction


@dataclass
class TermRestrictionInput:
    """Panel form input for a term restriction."""

    active: bool
    allowed_roles: list[str] = field(default_factory=list)
    whitelisted_users: list[int] = field(default_factory=list)
    denial_message: str = ""


@dataclass
class TermRestrictionPanel:
    """Everything the term edit panel needs to render."""

    term: TaxonomyTerm
    restriction: TermRestriction
    roles: list[Role]
    whitelisted_users: list[UserSummary]
