"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection

from termgate.domain.entities import Role


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_slug(self, slug: str) -> Role | None:
        """Get role by slug."""
        cur = await self._conn.execute(
            "SELECT slug, label FROM role WHERE slug = %s",
            (slug,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Role(slug=r[0], label=r[1])

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute("SELECT slug, label FROM role ORDER BY position, slug")
        rows = await cur.fetchall()
        return [Role(slug=r[0], label=r[1]) for r in rows]
