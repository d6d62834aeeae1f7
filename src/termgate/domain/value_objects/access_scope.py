"""Access scope - which taxonomies and content types are managed."""

from dataclasses import dataclass

DEFAULT_TAXONOMIES = ("download_category", "download_tag")
DEFAULT_CONTENT_TYPES = ("download",)


@dataclass(frozen=True)
class AccessScope:
    """Immutable set of managed taxonomies and content types."""

    taxonomies: frozenset[str] = frozenset(DEFAULT_TAXONOMIES)
    content_types: frozenset[str] = frozenset(DEFAULT_CONTENT_TYPES)

    def manages_taxonomy(self, taxonomy: str) -> bool:
        return taxonomy in self.taxonomies

    def manages_content_type(self, content_type: str) -> bool:
        return content_type in self.content_types
