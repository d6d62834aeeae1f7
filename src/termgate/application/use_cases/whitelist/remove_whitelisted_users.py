"""Remove whitelisted users use case."""

from termgate.application.ports import CapabilityChecker, TermRestrictionStore
from termgate.application.use_cases.admin_access import get_managed_term, require_manager
from termgate.domain.entities import Viewer
from termgate.domain.value_objects import AccessScope


class RemoveWhitelistedUsersUseCase:
    """Remove users from a term whitelist."""

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
        self, actor: Viewer, taxonomy: str, term_id: int, user_ids: list[int]
    ) -> None:
        require_manager(self._capabilities, actor)

        async with self._uow_factory() as uow:
            term = await get_managed_term(uow, self._scope, taxonomy, term_id)

        await self._store.remove_whitelisted_users(term.id, user_ids)
