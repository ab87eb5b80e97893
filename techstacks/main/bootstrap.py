"""
Application Bootstrapper - Main Layer

``AppHost.configure()`` prepares everything the web host needs before it
accepts requests, in a fixed order: settings, host configuration, database,
auth, external API clients, caches, schema, static path overrides, sitemaps
and finally the remaining features (views, query endpoints, validation).

Nothing here recovers from errors: any exception aborts startup.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from techstacks.application.models.host_config import HostConfig
from techstacks.application.validators import VALIDATORS as QUERY_VALIDATORS
from techstacks.domain.entities.sitemap import SitemapIndex
from techstacks.domain.services.validation import ValidatorRegistry
from techstacks.infrastructure.database import DOMAIN_TABLES, ensure_tables
from techstacks.infrastructure.settings import load_settings_source
from techstacks.presentation.validators import VALIDATORS as AUTH_VALIDATORS
from techstacks.shared import get_logger

from .config import AppConfig, build_app_config, build_host_config
from .container import AppContainer, init_container

logger = get_logger(__name__)


@dataclass(frozen=True)
class BootstrapResult:
    """Everything ``create_app`` needs from a configured host."""

    container: AppContainer
    app_config: AppConfig
    host_config: HostConfig
    sitemap_index: SitemapIndex
    validator_registry: ValidatorRegistry
    not_found_paths: Tuple[str, ...]


class AppHost:
    """Runs the startup sequence once for a content root."""

    def __init__(self, content_root: Union[str, Path]):
        self.content_root = Path(content_root)

    def configure(self) -> BootstrapResult:
        """
        Run the startup steps in order.

        Returns:
            The configured container plus the values computed at startup

        Raises:
            ConfigurationError: If the settings or database selection are unusable
            sqlalchemy.exc.SQLAlchemyError: If the schema or sitemap queries fail
        """
        logger.info("bootstrap.started", content_root=str(self.content_root))

        # 1. Settings
        source = load_settings_source(self.content_root)
        logger.info(
            "bootstrap.step.completed", step="settings", source=type(source).__name__
        )

        # 2. Host configuration
        host_config = build_host_config(source)
        logger.info(
            "bootstrap.step.completed",
            step="host_config",
            web_host_url=host_config.web_host_url,
        )

        # 3. Database
        app_config = build_app_config(source, self.content_root, host=host_config)
        database = app_config.database
        container = init_container(app_config)
        connection_factory = container.connection_factory()
        logger.info(
            "bootstrap.step.completed", step="database", dialect=database.dialect.value
        )

        # 4. Auth
        container.session_store()
        auth_providers = container.auth_providers()
        container.user_auth_repository().init_schema()
        logger.info(
            "bootstrap.step.completed",
            step="auth",
            providers=[provider.provider for provider in auth_providers],
        )

        # 5. External API clients
        twitter_updates = container.twitter_updates()
        logger.info(
            "bootstrap.step.completed",
            step="api_clients",
            twitter_updates_configured=twitter_updates.is_configured,
        )

        # 6. Caches
        container.cache_client().init_schema()
        container.content_cache()
        logger.info("bootstrap.step.completed", step="caches")

        with connection_factory.open_connection() as conn:
            # 7. Schema
            created = ensure_tables(conn, DOMAIN_TABLES)
            logger.info("bootstrap.step.completed", step="schema", created=created)

            # 8. Static path overrides
            not_found_paths = tuple(host_config.not_found_paths)
            logger.info(
                "bootstrap.step.completed",
                step="not_found_paths",
                paths=list(not_found_paths),
            )

            # 9. Sitemaps
            sitemap_index = container.build_sitemap_index_use_case().execute(conn)
            logger.info(
                "bootstrap.step.completed", step="sitemap", paths=sitemap_index.paths
            )

        # 10. Views, query endpoints and request validation
        validator_registry = container.validator_registry()
        validator_registry.register_all(QUERY_VALIDATORS)
        validator_registry.register_all(AUTH_VALIDATORS)
        logger.info(
            "bootstrap.step.completed",
            step="features",
            query_max_limit=host_config.query_max_limit,
            validated_requests=[t.__name__ for t in validator_registry.request_types],
        )

        logger.info("bootstrap.finished")
        return BootstrapResult(
            container=container,
            app_config=app_config,
            host_config=host_config,
            sitemap_index=sitemap_index,
            validator_registry=validator_registry,
            not_found_paths=not_found_paths,
        )
