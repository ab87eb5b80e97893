"""
Dependency container injection module - Main Layer

This module implements the dependency injection container that wires the
repositories, caches, identity providers and use cases of the web host.
Every provider receives its collaborators explicitly; the configuration
values come from the immutable ``AppConfig`` built at startup.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from techstacks.application.models.host_config import HostConfig
from techstacks.application.use_cases.auth_use_cases import (
    AuthenticateUseCase,
    GetSessionUseCase,
    LogoutUseCase,
)
from techstacks.application.use_cases.content_use_cases import (
    GetHomePageUseCase,
    GetStackPageUseCase,
    GetTechnologyPageUseCase,
    GetUserPageUseCase,
)
from techstacks.application.use_cases.query_use_cases import AutoQueryUseCase
from techstacks.application.use_cases.sitemap_use_cases import (
    BuildSitemapIndexUseCase,
)
from techstacks.domain.entities.user import UserSession
from techstacks.domain.services.validation import ValidatorRegistry
from techstacks.infrastructure.auth import (
    GithubAuthProvider,
    SessionStore,
    TwitterAuthProvider,
)
from techstacks.infrastructure.cache import (
    ContentCache,
    MemoryCacheClient,
    SqlCacheClient,
)
from techstacks.infrastructure.database import ConnectionFactory
from techstacks.infrastructure.gateways import TwitterUpdates
from techstacks.infrastructure.repositories import (
    SqlContentRepository,
    SqlQueryRepository,
    SqlUserAuthRepository,
)
from techstacks.shared import get_logger

from .config import AppConfig

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    host_config = providers.Singleton(
        lambda values: HostConfig(**values), config.host
    )

    # Infrastructure
    connection_factory = providers.Singleton(
        ConnectionFactory,
        dialect=config.database.dialect,
        connection_string=config.database.connection_string,
    )

    user_auth_repository = providers.Singleton(
        SqlUserAuthRepository,
        connection_factory=connection_factory,
    )

    content_repository = providers.Singleton(
        SqlContentRepository,
        connection_factory=connection_factory,
    )

    query_repository = providers.Singleton(
        SqlQueryRepository,
        connection_factory=connection_factory,
    )

    # Persistent cache, also holding sessions and pending sign-ins
    cache_client = providers.Singleton(
        SqlCacheClient,
        connection_factory=connection_factory,
    )

    content_cache = providers.Singleton(
        ContentCache,
        cache_client=providers.Singleton(MemoryCacheClient),
    )

    # Auth
    session_store = providers.Singleton(
        SessionStore,
        cache_client=cache_client,
        session_factory=providers.Object(UserSession),
    )

    twitter_auth_provider = providers.Singleton(
        TwitterAuthProvider,
        consumer_key=config.auth.twitter.consumer_key,
        consumer_secret=config.auth.twitter.consumer_secret,
        redirect_url=config.auth.twitter.redirect_url,
        callback_url=config.auth.twitter.callback_url,
    )

    github_auth_provider = providers.Singleton(
        GithubAuthProvider,
        consumer_key=config.auth.github.consumer_key,
        consumer_secret=config.auth.github.consumer_secret,
        redirect_url=config.auth.github.redirect_url,
        callback_url=config.auth.github.callback_url,
        scopes=config.auth.github.scopes,
    )

    auth_providers = providers.List(twitter_auth_provider, github_auth_provider)

    # Gateways
    twitter_updates = providers.Singleton(
        TwitterUpdates,
        consumer_key=config.twitter_updates.consumer_key,
        consumer_secret=config.twitter_updates.consumer_secret,
        access_token=config.twitter_updates.access_token,
        access_secret=config.twitter_updates.access_secret,
    )

    validator_registry = providers.Singleton(ValidatorRegistry)

    # Application (use cases)
    authenticate_use_case = providers.Factory(
        AuthenticateUseCase,
        auth_providers=auth_providers,
        user_auth_repository=user_auth_repository,
        session_store=session_store,
        state_store=cache_client,
        validator_registry=validator_registry,
        host_config=host_config,
    )

    get_session_use_case = providers.Factory(
        GetSessionUseCase,
        session_store=session_store,
    )

    logout_use_case = providers.Factory(
        LogoutUseCase,
        session_store=session_store,
    )

    auto_query_use_case = providers.Factory(
        AutoQueryUseCase,
        query_repository=query_repository,
        validator_registry=validator_registry,
        max_limit=providers.Callable(lambda host: host.query_max_limit, host_config),
    )

    build_sitemap_index_use_case = providers.Factory(
        BuildSitemapIndexUseCase,
        content_repository=content_repository,
        user_auth_repository=user_auth_repository,
        host_config=host_config,
    )

    get_home_page_use_case = providers.Factory(
        GetHomePageUseCase,
        content_repository=content_repository,
        content_cache=content_cache,
    )

    get_stack_page_use_case = providers.Factory(
        GetStackPageUseCase,
        content_repository=content_repository,
        content_cache=content_cache,
    )

    get_technology_page_use_case = providers.Factory(
        GetTechnologyPageUseCase,
        content_repository=content_repository,
        content_cache=content_cache,
    )

    get_user_page_use_case = providers.Factory(
        GetUserPageUseCase,
        content_repository=content_repository,
        user_auth_repository=user_auth_repository,
        content_cache=content_cache,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(app_config: AppConfig) -> AppContainer:
    """Initialize global container with the application configuration."""

    global _app_container

    container = AppContainer()
    container.config.from_dict(app_config.model_dump())
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle management for the resources owned by the container.

    Tables and sitemaps are prepared by the bootstrapper before the app is
    created; at shutdown the database engine is disposed.
    """
    container = get_container()
    connection_factory = container.connection_factory()

    try:
        logger.info("container.resources.initialized")
        yield container
    finally:
        connection_factory.dispose()
        logger.info("container.resources.shutdown")
