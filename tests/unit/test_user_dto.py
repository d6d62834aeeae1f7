"""Unit tests for user DTOs."""

import hashlib

from termgate.application.dto.user_dto import UserCandidate, UserSummary, avatar_url
from termgate.domain.entities import User


def test_avatar_url_uses_normalized_email_hash() -> None:
    digest = hashlib.md5(b"anna@example.com").hexdigest()
    assert avatar_url("  Anna@Example.com ") == (
        f"https://secure.gravatar.com/avatar/{digest}?s=32&d=mm"
    )


def test_summary_from_user_prefers_label_and_display_name() -> None:
    user = User(7, "annalee", "Anna Lee", "anna@example.com", "subscriber")
    summary = UserSummary.from_user(user, "Subscriber")
    assert summary.name == "Anna Lee"
    assert summary.role == "Subscriber"


def test_summary_falls_back_to_login_and_slug() -> None:
    user = User(9, "ghost", "", "g@example.com", "removed_role")
    summary = UserSummary.from_user(user)
    assert summary.name == "ghost"
    assert summary.role == "removed_role"


def test_candidate_defaults_enabled() -> None:
    user = User(7, "annalee", "Anna Lee", "anna@example.com", "subscriber")
    candidate = UserCandidate.from_user(user)
    assert isinstance(candidate, UserCandidate)
    assert candidate.disabled is False
