"""Add whitelisted user use case - resolve a user and add to a term whitelist."""

from termgate.application.dto.user_dto import UserSummary, WhitelistAddResult
from termgate.application.ports import CapabilityChecker, TermRestrictionStore
from termgate.application.use_cases.admin_access import get_managed_term, require_manager
from termgate.domain.entities import Viewer
from termgate.domain.exceptions import NotFound
from termgate.domain.value_objects import AccessScope, WhitelistOutcome


class AddWhitelistedUserUseCase:
    """Add user to a term whitelist and return a display summary."""

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
        self, actor: Viewer, taxonomy: str, term_id: int, user_id: int
    ) -> WhitelistAddResult:
        """Add user. Duplicates are not appended and report ALREADY_PRESENT."""
        require_manager(self._capabilities, actor)

        async with self._uow_factory() as uow:
            term = await get_managed_term(uow, self._scope, taxonomy, term_id)
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            role = await uow.roles.get_by_slug(user.role)

        added = await self._store.add_whitelisted_user(term.id, user.id)
        return WhitelistAddResult(
            outcome=WhitelistOutcome.ADDED if added else WhitelistOutcome.ALREADY_PRESENT,
            user=UserSummary.from_user(user, role.label if role else None),
        )
