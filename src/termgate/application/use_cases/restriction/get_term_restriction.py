"""Get term restriction use case - data for the term edit panel."""

from termgate.application.dto.restriction_dto import TermRestrictionPanel
from termgate.application.dto.user_dto import UserSummary
from termgate.application.ports import CapabilityChecker, TermRestrictionStore
from termgate.application.use_cases.admin_access import get_managed_term, require_manager
from termgate.domain.entities import ANONYMOUS_ROLE, Role, Viewer
from termgate.domain.value_objects import AccessScope


class GetTermRestrictionUseCase:
    """Load restriction, role choices and whitelisted users for a term."""

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

    async def execute(self, actor: Viewer, taxonomy: str, term_id: int) -> TermRestrictionPanel:
        require_manager(self._capabilities, actor)

        async with self._uow_factory() as uow:
            term = await get_managed_term(uow, self._scope, taxonomy, term_id)
            roles = await uow.roles.list_all()

        restriction = await self._store.get(term.id)

        async with self._uow_factory() as uow:
            users = await uow.users.get_many(restriction.whitelisted_users)

        labels = {r.slug: r.label for r in roles}
        by_id = {u.id: u for u in users}
        summaries = [
            UserSummary.from_user(by_id[uid], labels.get(by_id[uid].role))
            for uid in restriction.whitelisted_users
            if uid in by_id
        ]
        choices = [*roles, Role(slug=ANONYMOUS_ROLE, label="Anonymous")]
        return TermRestrictionPanel(
            term=term,
            restriction=restriction,
            roles=choices,
            whitelisted_users=summaries,
        )
