"""
Environment settings - Infrastructure Layer

Default settings source used when no override file is deployed. Keys are
looked up verbatim first, then in upper snake case (``OrmLite.Provider`` ->
``ORMLITE_PROVIDER``) so they can be set as ordinary environment variables,
and finally in the built-in defaults.
"""

import os
import re
from typing import Dict, Mapping, Optional

DEFAULT_APP_SETTINGS: Dict[str, str] = {
    "OrmLite.Provider": "Sqlite",
    "oauth.github.Scopes": "user",
}


def to_env_key(key: str) -> str:
    """``oauth.github.ClientId`` -> ``OAUTH_GITHUB_CLIENTID``."""
    return re.sub(r"[^0-9A-Za-z]+", "_", key).strip("_").upper()


class EnvironmentSettings:
    """Settings source backed by environment variables and defaults."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        defaults: Optional[Mapping[str, str]] = None,
    ):
        self._environ = os.environ if environ is None else environ
        self._defaults = dict(DEFAULT_APP_SETTINGS if defaults is None else defaults)

    def get_string(self, key: str) -> Optional[str]:
        if key in self._environ:
            return self._environ[key]
        env_key = to_env_key(key)
        if env_key in self._environ:
            return self._environ[env_key]
        return self._defaults.get(key)

    def get(self, key: str, default: str) -> str:
        value = self.get_string(key)
        return default if value is None else value

    def exists(self, key: str) -> bool:
        return self.get_string(key) is not None

    def get_all(self) -> Dict[str, str]:
        settings = dict(self._defaults)
        for key in self._defaults:
            value = self.get_string(key)
            if value is not None:
                settings[key] = value
        return settings
