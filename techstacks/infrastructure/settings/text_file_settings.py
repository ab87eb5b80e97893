"""
Text file settings - Infrastructure Layer

Line based settings file, one ``Key Value`` pair per line::

    # comment
    OrmLite.Provider Postgres
    OrmLite.ConnectionString Server=db;Database=techstacks
"""

from pathlib import Path
from typing import Dict, Optional, Union

from techstacks.domain.entities.errors import ConfigurationError
from techstacks.shared import get_logger

logger = get_logger(__name__)


def parse_settings_text(text: str, delimiter: str = " ") -> Dict[str, str]:
    """
    Parse the content of a settings file.

    Blank lines and lines starting with ``#`` are skipped. Each remaining
    line is split on the first delimiter; a key without a value maps to an
    empty string and later duplicates replace earlier ones.
    """
    settings: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition(delimiter)
        settings[key.strip()] = value.strip()
    return settings


class TextFileSettings:
    """Settings source backed by a text file, read once at construction."""

    def __init__(self, path: Union[str, Path], delimiter: str = " "):
        self.path = Path(path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(
                f"Unable to read settings file {self.path}",
                details={"error": str(exc)},
            ) from exc
        self._settings = parse_settings_text(text, delimiter)
        logger.info(
            "settings.file.loaded", path=str(self.path), keys=len(self._settings)
        )

    def get_string(self, key: str) -> Optional[str]:
        return self._settings.get(key)

    def get(self, key: str, default: str) -> str:
        value = self.get_string(key)
        return default if value is None else value

    def exists(self, key: str) -> bool:
        return key in self._settings

    def get_all(self) -> Dict[str, str]:
        return dict(self._settings)
