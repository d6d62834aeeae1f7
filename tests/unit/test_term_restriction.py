"""Unit tests for TermRestriction.permits."""

from termgate.domain.entities import ANONYMOUS_ROLE, TermRestriction, Viewer


def test_inactive_permits_everyone() -> None:
    r = TermRestriction(term_id=1, active=False)
    assert r.permits(Viewer.anonymous())
    assert r.permits(Viewer(role="subscriber", user_id=3))


def test_active_without_roles_or_users_permits_nobody() -> None:
    r = TermRestriction(term_id=1, active=True)
    assert not r.permits(Viewer(role="editor", user_id=5))
    assert not r.permits(Viewer.anonymous())


def test_role_match() -> None:
    r = TermRestriction(term_id=1, active=True, allowed_roles=frozenset({"subscriber"}))
    assert r.permits(Viewer(role="subscriber", user_id=3))
    assert not r.permits(Viewer(role="editor", user_id=3))


def test_whitelist_overrides_role_mismatch() -> None:
    r = TermRestriction(
        term_id=1,
        active=True,
        allowed_roles=frozenset({"subscriber"}),
        whitelisted_users=(42,),
    )
    assert r.permits(Viewer(role="editor", user_id=42))


def test_anonymous_needs_explicit_role() -> None:
    r = TermRestriction(term_id=1, active=True, allowed_roles=frozenset({"subscriber"}))
    assert not r.permits(Viewer.anonymous())

    open_to_guests = TermRestriction(
        term_id=1, active=True, allowed_roles=frozenset({ANONYMOUS_ROLE})
    )
    assert open_to_guests.permits(Viewer.anonymous())


def test_anonymous_role_slug_not_usable_by_logged_in_user_named_role() -> None:
    """A logged-in viewer is matched by their own role, not by the anonymous pseudo-role."""
    r = TermRestriction(term_id=1, active=True, allowed_roles=frozenset({ANONYMOUS_ROLE}))
    assert not r.permits(Viewer(role="subscriber", user_id=9))
