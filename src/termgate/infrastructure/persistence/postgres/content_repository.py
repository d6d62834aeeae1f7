"""PostgreSQL content item repository implementation."""

from psycopg import AsyncConnection

from termgate.domain.entities import ContentItem, TaxonomyTerm
from termgate.infrastructure.persistence.postgres.text_search import like_pattern


class PostgresContentRepository:
    """Content repository - published items with their taxonomy terms."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _attach_terms(self, items: list[ContentItem]) -> list[ContentItem]:
        if not items:
            return items
        by_id = {item.id: item for item in items}
        cur = await self._conn.execute(
            "SELECT ct.content_id, t.id, t.taxonomy, t.name, t.slug "
            "FROM content_term ct JOIN taxonomy_term t ON t.id = ct.term_id "
            "WHERE ct.content_id = ANY(%s) ORDER BY t.id",
            (list(by_id),),
        )
        for r in await cur.fetchall():
            by_id[r[0]].terms.append(
                TaxonomyTerm(id=r[1], taxonomy=r[2], name=r[3], slug=r[4])
            )
        return items

    async def get_by_id(self, item_id: int) -> ContentItem | None:
        """Get published item by id with terms."""
        cur = await self._conn.execute(
            "SELECT id, content_type, title, body FROM content_item "
            "WHERE id = %s AND status = 'publish'",
            (item_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        items = await self._attach_terms(
            [ContentItem(id=r[0], content_type=r[1], title=r[2], body=r[3])]
        )
        return items[0]

    async def list(
        self,
        content_type: str,
        *,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[ContentItem]:
        """List published items of a content type, optionally filtered by text."""
        sql = (
            "SELECT id, content_type, title, body FROM content_item "
            "WHERE content_type = %s AND status = 'publish'"
        )
        params: list = [content_type]
        if search:
            pattern = like_pattern(search)
            sql += " AND (title ILIKE %s OR body ILIKE %s)"
            params.extend([pattern, pattern])
        sql += " ORDER BY id LIMIT %s OFFSET %s"
        params.extend([limit, offset])
        cur = await self._conn.execute(sql, params)
        rows = await cur.fetchall()
        return await self._attach_terms(
            [ContentItem(id=r[0], content_type=r[1], title=r[2], body=r[3]) for r in rows]
        )
