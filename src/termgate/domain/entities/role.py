"""Role entity - host user role."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Role:
    """Role known to the host user directory, e.g. subscriber, editor."""

    slug: str
    label: str
