"""PostgreSQL term metadata repository implementation."""

from collections.abc import Iterable
from typing import Any

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb


class PostgresTermMetaRepository:
    """Term meta repository - one jsonb value per (term_id, meta_key)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_all(self, term_id: int, keys: Iterable[str]) -> dict[str, Any]:
        """Get meta values for term, limited to keys."""
        cur = await self._conn.execute(
            "SELECT meta_key, meta_value FROM term_meta "
            "WHERE term_id = %s AND meta_key = ANY(%s)",
            (term_id, list(keys)),
        )
        rows = await cur.fetchall()
        return {r[0]: r[1] for r in rows}

    async def get_for_terms(
        self, term_ids: Iterable[int], keys: Iterable[str]
    ) -> dict[int, dict[str, Any]]:
        """Get meta values for several terms, keyed by term id."""
        cur = await self._conn.execute(
            "SELECT term_id, meta_key, meta_value FROM term_meta "
            "WHERE term_id = ANY(%s) AND meta_key = ANY(%s)",
            (list(term_ids), list(keys)),
        )
        rows = await cur.fetchall()
        result: dict[int, dict[str, Any]] = {}
        for r in rows:
            result.setdefault(r[0], {})[r[1]] = r[2]
        return result

    async def get_for_update(self, term_id: int, key: str, default: Any) -> Any:
        """Get one meta value, locking its row until the transaction ends.

        A missing row is first created with default so there is a row to lock.
        """
        await self._conn.execute(
            "INSERT INTO term_meta (term_id, meta_key, meta_value) VALUES (%s, %s, %s) "
            "ON CONFLICT (term_id, meta_key) DO NOTHING",
            (term_id, key, Jsonb(default)),
        )
        cur = await self._conn.execute(
            "SELECT meta_value FROM term_meta WHERE term_id = %s AND meta_key = %s FOR UPDATE",
            (term_id, key),
        )
        r = await cur.fetchone()
        return r[0] if r else default

    async def set_many(self, term_id: int, values: dict[str, Any]) -> None:
        """Upsert meta values for term."""
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO term_meta (term_id, meta_key, meta_value) VALUES (%s, %s, %s) "
                "ON CONFLICT (term_id, meta_key) DO UPDATE SET meta_value = EXCLUDED.meta_value",
                [(term_id, key, Jsonb(value)) for key, value in values.items()],
            )
