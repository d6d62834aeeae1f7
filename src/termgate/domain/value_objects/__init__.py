"""Domain value objects."""

from termgate.domain.value_objects.access_scope import AccessScope
from termgate.domain.value_objects.restriction_meta_key import RestrictionMetaKey
from termgate.domain.value_objects.whitelist_outcome import WhitelistOutcome

__all__ = [
    "AccessScope",
    "RestrictionMetaKey",
    "WhitelistOutcome",
]
