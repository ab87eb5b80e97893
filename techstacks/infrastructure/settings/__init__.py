"""Settings sources - Infrastructure Layer."""

from .environment_settings import DEFAULT_APP_SETTINGS, EnvironmentSettings, to_env_key
from .loader import SETTINGS_FILE_NAME, load_settings_source
from .text_file_settings import TextFileSettings, parse_settings_text

__all__ = [
    "DEFAULT_APP_SETTINGS",
    "EnvironmentSettings",
    "SETTINGS_FILE_NAME",
    "TextFileSettings",
    "load_settings_source",
    "parse_settings_text",
    "to_env_key",
]
