"""Application entry point and composition root."""

import logging

from termgate import __version__
from termgate.application.use_cases.content.content_gate import ContentGate
from termgate.application.use_cases.content.get_content import GetContentUseCase
from termgate.application.use_cases.content.list_content import ListContentUseCase
from termgate.application.use_cases.restriction.get_term_restriction import (
    GetTermRestrictionUseCase,
)
from termgate.application.use_cases.restriction.save_term_restriction import (
    SaveTermRestrictionUseCase,
)
from termgate.application.use_cases.whitelist.add_whitelisted_user import (
    AddWhitelistedUserUseCase,
)
from termgate.application.use_cases.whitelist.remove_whitelisted_users import (
    RemoveWhitelistedUsersUseCase,
)
from termgate.application.use_cases.whitelist.search_users import SearchUsersUseCase
from termgate.config import Settings, get_settings
from termgate.domain.value_objects import AccessScope
from termgate.infrastructure.auth.keycloak_provider import KeycloakProvider
from termgate.infrastructure.permission.access_checker import TermAccessChecker
from termgate.infrastructure.permission.capability_checker import RoleCapabilityChecker
from termgate.infrastructure.persistence.postgres.connection import create_pool
from termgate.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from termgate.infrastructure.restriction.term_restriction_store import (
    TermMetaRestrictionStore,
)
from termgate.interfaces.api.app import create_app
from termgate.interfaces.api.middleware.auth import AuthMiddleware
from termgate.interfaces.api.middleware.cors import CORSMiddleware
from termgate.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from termgate.interfaces.api.resources.ajax import AddUserResource, SearchUsersResource
from termgate.interfaces.api.resources.contents import ContentResource, ContentsResource
from termgate.interfaces.api.resources.health import HealthResource
from termgate.interfaces.api.resources.terms import (
    TermRestrictionResource,
    TermWhitelistResource,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_termgate_app(
    settings: Settings | None = None,
    scope: AccessScope | None = None,
    capability_checker=None,
):
    """Composition root - build Falcon app with all dependencies.

    Integrators may pass their own AccessScope or capability checker to
    extend the managed taxonomies, content types or bypass rules.
    """
    settings = settings or get_settings()
    scope = scope or settings.access_scope()
    capability_checker = capability_checker or RoleCapabilityChecker(
        bypass_roles=settings.bypass_roles,
        manager_roles=settings.manager_roles,
    )

    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    store = TermMetaRestrictionStore(uow_factory)
    access_checker = TermAccessChecker(store, capability_checker, scope)
    content_gate = ContentGate(access_checker, settings.default_denial_message)

    admin_deps = {
        "unit_of_work_factory": uow_factory,
        "store": store,
        "capability_checker": capability_checker,
        "scope": scope,
    }
    list_content = ListContentUseCase(uow_factory, content_gate)
    get_content = GetContentUseCase(uow_factory, content_gate)
    get_restriction = GetTermRestrictionUseCase(**admin_deps)
    save_restriction = SaveTermRestrictionUseCase(**admin_deps)
    search_users = SearchUsersUseCase(**admin_deps, limit=settings.user_search_limit)
    add_user = AddWhitelistedUserUseCase(**admin_deps)
    remove_users = RemoveWhitelistedUsersUseCase(**admin_deps)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    logger.info(
        "TermGate v%s: taxonomies=%s content_types=%s",
        __version__,
        sorted(scope.taxonomies),
        sorted(scope.content_types),
    )
    return create_app(
        contents_resource=ContentsResource(list_content),
        content_resource=ContentResource(get_content),
        term_restriction_resource=TermRestrictionResource(get_restriction, save_restriction),
        term_whitelist_resource=TermWhitelistResource(remove_users),
        search_users_resource=SearchUsersResource(search_users),
        add_user_resource=AddUserResource(add_user),
        health_resource=HealthResource(),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(uow_factory, keycloak),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    app = create_termgate_app(settings)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())
