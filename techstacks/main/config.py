"""
Application Settings - Main Layer

Two kinds of configuration live here:

- ``RuntimeSettings``: process-level settings (environment, content root,
  port, logging) read with Pydantic Settings from environment variables,
  a ``.env`` file and defaults.
- ``AppConfig``: the immutable application configuration, built once from
  the settings source chosen at startup (``appsettings.txt`` or the
  environment) and handed to the dependency container.
"""

from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from techstacks.application.models.host_config import (
    DEFAULT_WEB_HOST_URL,
    HostConfig,
)
from techstacks.domain.ports.settings_source import ISettingsSource
from techstacks.infrastructure.database.connection_factory import (
    DatabaseConfig,
    select_database,
)
from techstacks.shared import EnumEnvironment, EnumLogLevel

SQLITE_RELATIVE_PATH = Path("App_Data") / "db.sqlite"
AUTH_PROVIDERS = ("twitter", "github")


class HostSettings(BaseSettings):
    """Web host settings."""

    content_root: str = Field(
        default=".", description="Directory holding appsettings.txt and App_Data"
    )
    bind: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="HOST_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class RuntimeSettings(BaseSettings):
    """Process settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    host: HostSettings = Field(default_factory=HostSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


class OAuthProviderConfig(BaseModel):
    """Credentials and URLs for one external identity provider."""

    model_config = ConfigDict(frozen=True)

    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    scopes: Optional[str] = None
    redirect_url: str
    callback_url: str


class TwitterUpdatesConfig(BaseModel):
    """Application account used to post status updates."""

    model_config = ConfigDict(frozen=True)

    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    access_token: Optional[str] = None
    access_secret: Optional[str] = None


class AppConfig(BaseModel):
    """Immutable application configuration."""

    model_config = ConfigDict(frozen=True)

    content_root: str
    host: HostConfig
    database: DatabaseConfig
    twitter_updates: TwitterUpdatesConfig
    auth: Dict[str, OAuthProviderConfig]


def _oauth_config(
    source: ISettingsSource, provider: str, web_host_url: str
) -> OAuthProviderConfig:
    prefix = f"oauth.{provider}."
    consumer_key = source.get_string(prefix + "ConsumerKey")
    consumer_secret = source.get_string(prefix + "ConsumerSecret")
    if provider == "github":
        consumer_key = consumer_key or source.get_string(prefix + "ClientId")
        consumer_secret = consumer_secret or source.get_string(prefix + "ClientSecret")

    return OAuthProviderConfig(
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        scopes=source.get_string(prefix + "Scopes"),
        redirect_url=source.get(prefix + "RedirectUrl", web_host_url),
        callback_url=source.get(
            prefix + "CallbackUrl", f"{web_host_url.rstrip('/')}/auth/{provider}"
        ),
    )


def build_host_config(source: ISettingsSource) -> HostConfig:
    return HostConfig(web_host_url=source.get("WebHostUrl", DEFAULT_WEB_HOST_URL))


def build_database_config(
    source: ISettingsSource, content_root: Path
) -> DatabaseConfig:
    """
    Select the database from ``OrmLite.Provider``.

    Raises:
        ConfigurationError: If PostgreSQL is selected without a usable
            connection string
    """
    return select_database(
        source.get_string("OrmLite.Provider"),
        source.get_string("OrmLite.ConnectionString"),
        Path(content_root) / SQLITE_RELATIVE_PATH,
    )


def build_twitter_updates_config(source: ISettingsSource) -> TwitterUpdatesConfig:
    return TwitterUpdatesConfig(
        consumer_key=source.get_string("WebStacks.ConsumerKey"),
        consumer_secret=source.get_string("WebStacks.ConsumerSecret"),
        access_token=source.get_string("WebStacks.AccessToken"),
        access_secret=source.get_string("WebStacks.AccessSecret"),
    )


def build_auth_config(
    source: ISettingsSource, web_host_url: str
) -> Dict[str, OAuthProviderConfig]:
    return {
        provider: _oauth_config(source, provider, web_host_url)
        for provider in AUTH_PROVIDERS
    }


def build_app_config(
    source: ISettingsSource,
    content_root: Path,
    host: Optional[HostConfig] = None,
) -> AppConfig:
    """
    Read every application setting from ``source`` once.

    Args:
        source: Settings source selected at startup
        content_root: Directory holding ``App_Data``
        host: Host configuration already read from ``source``, if any

    Raises:
        ConfigurationError: If the database settings are unusable
    """
    host = host or build_host_config(source)
    return AppConfig(
        content_root=str(content_root),
        host=host,
        database=build_database_config(source, content_root),
        twitter_updates=build_twitter_updates_config(source),
        auth=build_auth_config(source, host.web_host_url),
    )


def get_settings() -> RuntimeSettings:
    """
    Get runtime settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return RuntimeSettings()
