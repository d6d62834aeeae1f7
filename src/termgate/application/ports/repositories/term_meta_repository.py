"""Term metadata repository port."""

from collections.abc import Iterable
from typing import Any, Protocol


class TermMetaRepository(Protocol):
    """Port for key/value metadata attached to taxonomy terms."""

    async def get_all(self, term_id: int, keys: Iterable[str]) -> dict[str, Any]: ...

    async def get_for_terms(
        self, term_ids: Iterable[int], keys: Iterable[str]
    ) -> dict[int, dict[str, Any]]: ...

    async def get_for_update(self, term_id: int, key: str, default: Any) -> Any: ...

    async def set_many(self, term_id: int, values: dict[str, Any]) -> None: ...
