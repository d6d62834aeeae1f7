"""PostgreSQL taxonomy term repository implementation."""

from psycopg import AsyncConnection

from termgate.domain.entities import TaxonomyTerm


class PostgresTermRepository:
    """Taxonomy term repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_in_taxonomy(self, taxonomy: str, term_id: int) -> TaxonomyTerm | None:
        """Get term by id, only if it belongs to taxonomy."""
        cur = await self._conn.execute(
            "SELECT id, taxonomy, name, slug FROM taxonomy_term WHERE id = %s AND taxonomy = %s",
            (term_id, taxonomy),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return TaxonomyTerm(id=r[0], taxonomy=r[1], name=r[2], slug=r[3])
