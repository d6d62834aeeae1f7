"""Outcome of adding a user to a term whitelist."""

from enum import StrEnum


class WhitelistOutcome(StrEnum):
    """Whether the user was appended or was already on the whitelist."""

    ADDED = "added"
    ALREADY_PRESENT = "already_present"
