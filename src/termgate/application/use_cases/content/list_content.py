"""List content use case - gated listing and search."""

from termgate.application.use_cases.content.content_gate import ContentGate
from termgate.domain.entities import ContentItem, Viewer


class ListContentUseCase:
    """List items of a content type that the viewer may see."""

    def __init__(self, unit_of_work_factory: type, content_gate: ContentGate) -> None:
        self._uow_factory = unit_of_work_factory
        self._gate = content_gate

    async def execute(
        self,
        viewer: Viewer,
        content_type: str,
        *,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[ContentItem]:
        """List (or search) items, dropping restricted ones."""
        async with self._uow_factory() as uow:
            items = await uow.contents.list(
                content_type, search=search, limit=limit, offset=offset
            )
        return await self._gate.filter_visible(items, viewer)
