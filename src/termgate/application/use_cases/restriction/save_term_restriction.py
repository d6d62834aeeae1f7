"""Save term restriction use case - persist the term edit panel form."""

from termgate.application.dto.restriction_dto import TermRestrictionInput
from termgate.application.ports import CapabilityChecker, TermRestrictionStore
from termgate.application.use_cases.admin_access import get_managed_term, require_manager
from termgate.domain.entities import TermRestriction, Viewer
from termgate.domain.value_objects import AccessScope


class SaveTermRestrictionUseCase:
    """Save restriction settings for a term of a managed taxonomy."""

    def __init__(
        self,
        unit_of_work_factory: type,
        store: TermRestrictionStore,
        capability_checker: CapabilityChecker,
        scope: AccessScope,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store
        self._capabilities = capability_checker
        self._scope = scope

    async def execute(
        self,
        actor: Viewer,
        taxonomy: str,
        term_id: int,
        input_data: TermRestrictionInput,
    ) -> TermRestriction:
        """Save settings. Unknown roles and users are dropped."""
        require_manager(self._capabilities, actor)

        async with self._uow_factory() as uow:
            term = await get_managed_term(uow, self._scope, taxonomy, term_id)
            requested = list(dict.fromkeys(input_data.whitelisted_users))
            existing = {u.id for u in await uow.users.get_many(requested)}

        settings = TermRestriction(
            term_id=term.id,
            active=input_data.active,
            allowed_roles=frozenset(input_data.allowed_roles),
            whitelisted_users=tuple(u for u in requested if u in existing),
            denial_message=input_data.denial_message.strip(),
        )
        return await self._store.save(term.id, settings)
