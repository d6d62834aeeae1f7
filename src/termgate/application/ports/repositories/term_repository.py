"""Taxonomy term repository port."""

from typing import Protocol

from termgate.domain.entities import TaxonomyTerm


class TermRepository(Protocol):
    """Port for reading host taxonomy terms."""

    async def get_in_taxonomy(self, taxonomy: str, term_id: int) -> TaxonomyTerm | None: ...
