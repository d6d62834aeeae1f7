"""Content item repository port."""

from typing import Protocol

from termgate.domain.entities import ContentItem


class ContentRepository(Protocol):
    """Port for reading host content items together with their terms."""

    async def get_by_id(self, item_id: int) -> ContentItem | None: ...

    async def list(
        self,
        content_type: str,
        *,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[ContentItem]: ...
