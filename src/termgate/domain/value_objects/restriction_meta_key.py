"""Term metadata keys holding restriction settings."""

from enum import StrEnum


class RestrictionMetaKey(StrEnum):
    """Keys under which a term's restriction is stored in term metadata."""

    ACTIVE = "termgate_active"
    ROLES = "termgate_roles"
    WHITELIST = "termgate_whitelist"
    MESSAGE = "termgate_message"
