"""Unit tests for settings and access scope."""

from termgate.config import Settings
from termgate.domain.value_objects import AccessScope


def test_default_scope() -> None:
    scope = Settings(_env_file=None).access_scope()
    assert scope == AccessScope()
    assert scope.manages_taxonomy("download_category")
    assert scope.manages_taxonomy("download_tag")
    assert not scope.manages_taxonomy("category")
    assert scope.manages_content_type("download")
    assert not scope.manages_content_type("post")


def test_scope_overridden_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("MANAGED_TAXONOMIES", '["download_category", "genre"]')
    monkeypatch.setenv("MANAGED_CONTENT_TYPES", '["download", "bundle"]')
    scope = Settings(_env_file=None).access_scope()
    assert scope.taxonomies == frozenset({"download_category", "genre"})
    assert scope.content_types == frozenset({"download", "bundle"})


def test_default_roles() -> None:
    settings = Settings(_env_file=None)
    assert settings.bypass_roles == ["administrator"]
    assert settings.manager_roles == ["administrator", "shop_manager"]
    assert settings.user_search_limit == 20
