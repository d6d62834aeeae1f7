"""Pytest fixtures for TermGate tests."""

from __future__ import annotations

import asyncio
import copy
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from typing import Any

import pytest

from termgate.domain.entities import ContentItem, Role, TaxonomyTerm, User
from termgate.domain.value_objects import AccessScope
from termgate.infrastructure.permission.access_checker import TermAccessChecker
from termgate.infrastructure.permission.capability_checker import RoleCapabilityChecker
from termgate.infrastructure.restriction.term_restriction_store import (
    TermMetaRestrictionStore,
)


# --- Fake repositories ---


class FakeTermMetaRepository:
    """In-memory term meta repository."""

    def __init__(self) -> None:
        self._by_term: dict[int, dict[str, Any]] = {}
        self.writes = 0
        self.batch_reads = 0
        self._row_locks: dict[tuple[int, str], asyncio.Lock] = {}
        self._held: dict[asyncio.Task, list[asyncio.Lock]] = {}

    async def get_all(self, term_id: int, keys: Iterable[str]) -> dict[str, Any]:
        meta = self._by_term.get(term_id, {})
        return {k: copy.deepcopy(meta[k]) for k in keys if k in meta}

    async def get_for_terms(
        self, term_ids: Iterable[int], keys: Iterable[str]
    ) -> dict[int, dict[str, Any]]:
        keys = list(keys)
        self.batch_reads += 1
        result = {}
        for term_id in term_ids:
            meta = await self.get_all(term_id, keys)
            if meta:
                result[term_id] = meta
        return result

    async def get_for_update(self, term_id: int, key: str, default: Any) -> Any:
        lock = self._row_locks.setdefault((term_id, key), asyncio.Lock())
        await lock.acquire()
        self._held.setdefault(asyncio.current_task(), []).append(lock)
        meta = self._by_term.setdefault(term_id, {})
        meta.setdefault(key, copy.deepcopy(default))
        value = copy.deepcopy(meta[key])
        # Let other tasks run between the read and the write.
        await asyncio.sleep(0)
        return value

    def release_locks(self) -> None:
        """Release row locks held by the current task, as commit would."""
        for lock in self._held.pop(asyncio.current_task(), []):
            lock.release()

    async def set_many(self, term_id: int, values: dict[str, Any]) -> None:
        self.writes += 1
        self._by_term.setdefault(term_id, {}).update(copy.deepcopy(values))

    def put(self, term_id: int, key: str, value: Any) -> None:
        """Helper to seed raw meta for tests."""
        self._by_term.setdefault(term_id, {})[key] = value

    def delete_term(self, term_id: int) -> None:
        """Helper mirroring the ON DELETE CASCADE on term deletion."""
        self._by_term.pop(term_id, None)


class FakeTermRepository:
    """In-memory taxonomy term repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, TaxonomyTerm] = {}

    async def get_in_taxonomy(self, taxonomy: str, term_id: int) -> TaxonomyTerm | None:
        term = self._by_id.get(term_id)
        if term and term.taxonomy == taxonomy:
            return term
        return None

    def add_term(self, term: TaxonomyTerm) -> TaxonomyTerm:
        self._by_id[term.id] = term
        return term


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_slug: dict[str, Role] = {}

    async def get_by_slug(self, slug: str) -> Role | None:
        return self._by_slug.get(slug)

    async def list_all(self) -> list[Role]:
        return list(self._by_slug.values())

    def add_role(self, role: Role) -> None:
        self._by_slug[role.slug] = role

    def remove_role(self, slug: str) -> None:
        self._by_slug.pop(slug, None)


class FakeUserRepository:
    """In-memory user directory."""

    def __init__(self) -> None:
        self._by_id: dict[int, User] = {}

    async def get_by_id(self, user_id: int) -> User | None:
        return self._by_id.get(user_id)

    async def get_by_login(self, login: str) -> User | None:
        for u in self._by_id.values():
            if u.login == login:
                return u
        return None

    async def get_many(self, user_ids: Iterable[int]) -> list[User]:
        return [self._by_id[i] for i in user_ids if i in self._by_id]

    async def search(self, query: str, limit: int = 20) -> list[User]:
        q = query.lower()
        matches = [
            u
            for u in self._by_id.values()
            if q in u.login.lower() or q in u.display_name.lower() or q in u.email.lower()
        ]
        matches.sort(key=lambda u: (u.display_name, u.id))
        return matches[:limit]

    def add_user(self, user: User) -> User:
        self._by_id[user.id] = user
        return user


class FakeContentRepository:
    """In-memory content repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, ContentItem] = {}

    async def get_by_id(self, item_id: int) -> ContentItem | None:
        return self._by_id.get(item_id)

    async def list(
        self,
        content_type: str,
        *,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[ContentItem]:
        items = [i for i in self._by_id.values() if i.content_type == content_type]
        if search:
            s = search.lower()
            items = [i for i in items if s in i.title.lower() or s in i.body.lower()]
        items.sort(key=lambda i: i.id)
        return items[offset : offset + limit]

    def add_item(self, item: ContentItem) -> ContentItem:
        self._by_id[item.id] = item
        return item


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.term_meta = FakeTermMetaRepository()
        self.terms = FakeTermRepository()
        self.roles = FakeRoleRepository()
        self.users = FakeUserRepository()
        self.contents = FakeContentRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


# Term ids used across tests
PREMIUM = 10
FREE = 11
BETA_TAG = 20
NEWS = 30


def seed_host(uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """Roles, terms and users resembling a small shop."""
    for slug, label in [
        ("administrator", "Administrator"),
        ("editor", "Editor"),
        ("subscriber", "Subscriber"),
        ("shop_manager", "Shop Manager"),
    ]:
        uow.roles.add_role(Role(slug=slug, label=label))
    uow.terms.add_term(TaxonomyTerm(PREMIUM, "download_category", "Premium", "premium"))
    uow.terms.add_term(TaxonomyTerm(FREE, "download_category", "Free", "free"))
    uow.terms.add_term(TaxonomyTerm(BETA_TAG, "download_tag", "Beta", "beta"))
    uow.terms.add_term(TaxonomyTerm(NEWS, "category", "News", "news"))
    uow.users.add_user(User(1, "admin", "Site Admin", "admin@example.com", "administrator"))
    uow.users.add_user(User(2, "manager", "Shop Manager", "manager@example.com", "shop_manager"))
    uow.users.add_user(User(7, "annalee", "Anna Lee", "anna@example.com", "subscriber"))
    uow.users.add_user(User(8, "bob", "Bob", "bob@example.com", "editor"))
    uow.users.add_user(User(42, "joanne", "Joanne", "joanne@example.com", "editor"))
    return uow


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        try:
            yield uow
        finally:
            uow.term_meta.release_locks()

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Seeded in-memory UnitOfWork shared by every factory call in a test."""
    return seed_host(FakeUnitOfWork())


@pytest.fixture
def uow_factory(fake_uow):
    return make_uow_factory(fake_uow)


@pytest.fixture
def scope() -> AccessScope:
    return AccessScope()


@pytest.fixture
def capability_checker() -> RoleCapabilityChecker:
    return RoleCapabilityChecker(
        bypass_roles=["administrator"],
        manager_roles=["administrator", "shop_manager"],
    )


@pytest.fixture
def store(uow_factory) -> TermMetaRestrictionStore:
    return TermMetaRestrictionStore(uow_factory)


@pytest.fixture
def access_checker(store, capability_checker, scope) -> TermAccessChecker:
    return TermAccessChecker(store, capability_checker, scope)
