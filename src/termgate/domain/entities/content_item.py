"""Content item entity - owned by the host content store."""

from dataclasses import dataclass, field

from termgate.domain.entities.taxonomy_term import TaxonomyTerm


@dataclass
class ContentItem:
    """Item of a content type (e.g. download) with its taxonomy terms."""

    id: int
    content_type: str
    title: str
    body: str
    terms: list[TaxonomyTerm] = field(default_factory=list)
