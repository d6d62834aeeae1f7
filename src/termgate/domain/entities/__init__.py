"""Domain entities."""

from termgate.domain.entities.content_item import ContentItem
from termgate.domain.entities.role import Role
from termgate.domain.entities.taxonomy_term import TaxonomyTerm
from termgate.domain.entities.term_restriction import TermRestriction
from termgate.domain.entities.user import User
from termgate.domain.entities.viewer import ANONYMOUS_ROLE, Viewer

__all__ = [
    "ANONYMOUS_ROLE",
    "ContentItem",
    "Role",
    "TaxonomyTerm",
    "TermRestriction",
    "User",
    "Viewer",
]
