"""User entity - entry in the host user directory."""

from dataclasses import dataclass


@dataclass
class User:
    """Directory user with a single primary role."""

    id: int
    login: str
    display_name: str
    email: str
    role: str
