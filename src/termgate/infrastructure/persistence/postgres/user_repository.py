"""PostgreSQL user directory repository implementation."""

from collections.abc import Iterable

from psycopg import AsyncConnection

from termgate.domain.entities import User
from termgate.infrastructure.persistence.postgres.text_search import like_pattern

_COLUMNS = "id, login, display_name, email, role"


def _to_user(r: tuple) -> User:
    return User(id=r[0], login=r[1], display_name=r[2], email=r[3], role=r[4])


class PostgresUserRepository:
    """User directory repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: int) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def get_by_login(self, login: str) -> User | None:
        """Get user by login name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE login = %s",
            (login,),
        )
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def get_many(self, user_ids: Iterable[int]) -> list[User]:
        """Get users by ids (missing ids are skipped, order not guaranteed)."""
        ids = list(user_ids)
        if not ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = ANY(%s)",
            (ids,),
        )
        rows = await cur.fetchall()
        return [_to_user(r) for r in rows]

    async def search(self, query: str, limit: int = 20) -> list[User]:
        """Case-insensitive substring search on login, display name and email."""
        pattern = like_pattern(query)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user "
            "WHERE login ILIKE %s OR display_name ILIKE %s OR email ILIKE %s "
            "ORDER BY display_name, id LIMIT %s",
            (pattern, pattern, pattern, limit),
        )
        rows = await cur.fetchall()
        return [_to_user(r) for r in rows]
