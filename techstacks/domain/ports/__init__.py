"""Domain ports package."""

from .auth_provider import IAuthProvider
from .cache_client import ICacheClient
from .connection_factory import IDbConnectionFactory
from .settings_source import ISettingsSource

__all__ = ["IAuthProvider", "ICacheClient", "IDbConnectionFactory", "ISettingsSource"]
