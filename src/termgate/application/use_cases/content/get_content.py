"""Get content use case - gated single-item display."""

from termgate.application.dto.content_dto import GatedContent
from termgate.application.use_cases.content.content_gate import ContentGate
from termgate.domain.entities import Viewer
from termgate.domain.exceptions import NotFound


class GetContentUseCase:
    """Get single item as the viewer may see it."""

    def __init__(self, unit_of_work_factory: type, content_gate: ContentGate) -> None:
        self._uow_factory = unit_of_work_factory
        self._gate = content_gate

    async def execute(self, viewer: Viewer, content_type: str, item_id: int) -> GatedContent:
        """Get item by id; restricted items come back without their body."""
        async with self._uow_factory() as uow:
            item = await uow.contents.get_by_id(item_id)
        if not item or item.content_type != content_type:
            raise NotFound("Content", f"{content_type}/{item_id}")
        return await self._gate.resolve(item, viewer)
