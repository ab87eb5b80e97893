"""Settings source selection."""

from pathlib import Path
from typing import Union

from techstacks.domain.ports.settings_source import ISettingsSource
from techstacks.shared import get_logger

from .environment_settings import EnvironmentSettings
from .text_file_settings import TextFileSettings

logger = get_logger(__name__)

SETTINGS_FILE_NAME = "appsettings.txt"


def load_settings_source(
    content_root: Union[str, Path], file_name: str = SETTINGS_FILE_NAME
) -> ISettingsSource:
    """
    Pick the settings source for this process.

    An ``appsettings.txt`` in the content root replaces the environment
    backed defaults entirely; the two are never merged.
    """
    settings_file = Path(content_root) / file_name
    if settings_file.is_file():
        return TextFileSettings(settings_file)

    logger.info("settings.file.absent", path=str(settings_file))
    return EnvironmentSettings()
