"""Helpers for ILIKE substring search."""


def like_pattern(query: str) -> str:
    """Escape LIKE wildcards and wrap query for substring matching."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
