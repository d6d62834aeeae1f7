"""Content DTOs."""

from dataclasses import dataclass

from termgate.domain.entities import ContentItem


@dataclass
class GatedContent:
    """Single item as the viewer may see it."""

    item: ContentItem
    restricted: bool = False
    message: str | None = None
