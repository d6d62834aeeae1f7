"""Search users use case - whitelist candidates for a term."""

from termgate.application.dto.user_dto import UserCandidate
from termgate.application.ports import CapabilityChecker, TermRestrictionStore
from termgate.application.use_cases.admin_access import get_managed_term, require_manager
from termgate.domain.entities import Viewer
from termgate.domain.exceptions import ValidationError
from termgate.domain.value_objects import AccessScope

MIN_QUERY_LENGTH = 3


class SearchUsersUseCase:
    """Free-text user directory search for the whitelist picker."""

    def __init__(
        self,
        unit_of_work_factory: type,
        store: TermRestrictionStore,
        capability_checker: CapabilityChecker,
        scope: AccessScope,
        limit: int = 20,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store
        self._capabilities = capability_checker
        self._scope = scope
        self._limit = limit

    async def execute(
        self,
        actor: Viewer,
        query: str,
        taxonomy: str | None = None,
        term_id: int | None = None,
    ) -> list[UserCandidate]:
        """Search users; already whitelisted users on the term are disabled."""
        require_manager(self._capabilities, actor)

        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            raise ValidationError(f"Query must be at least {MIN_QUERY_LENGTH} characters")

        async with self._uow_factory() as uow:
            term = None
            if taxonomy is not None and term_id is not None:
                term = await get_managed_term(uow, self._scope, taxonomy, term_id)
            users = await uow.users.search(query, limit=self._limit)
            labels = {r.slug: r.label for r in await uow.roles.list_all()}

        whitelisted: tuple[int, ...] = ()
        if term is not None:
            whitelisted = (await self._store.get(term.id)).whitelisted_users

        candidates = []
        for user in users:
            candidate = UserCandidate.from_user(user, labels.get(user.role))
            candidate.disabled = user.id in whitelisted
            candidates.append(candidate)
        return candidates
