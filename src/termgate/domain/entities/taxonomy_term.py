"""Taxonomy term entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxonomyTerm:
    """Category or tag attached to content items."""

    id: int
    taxonomy: str
    name: str
    slug: str
