"""Request parameter parsing shared by resources."""

from typing import Any


def parse_id(value: Any) -> int | None:
    """Parse a positive integer id from JSON or query input; None if malformed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        parsed = int(value.strip())
        return parsed if parsed > 0 else None
    return None


def user_summary_media(summary) -> dict[str, Any]:
    return {
        "id": summary.id,
        "name": summary.name,
        "email": summary.email,
        "role": summary.role,
        "avatar_url": summary.avatar_url,
    }
