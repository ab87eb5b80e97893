"""Domain port for key/value application settings."""

from __future__ import annotations

from typing import Dict, Optional, Protocol


class ISettingsSource(Protocol):
    """Read-only mapping of setting keys (e.g. ``OrmLite.Provider``) to strings."""

    def get_string(self, key: str) -> Optional[str]:
        """Return the raw value, or None when the key is not set."""
        ...

    def get(self, key: str, default: str) -> str:
        """Return the value, or ``default`` when the key is not set."""
        ...

    def exists(self, key: str) -> bool:
        ...

    def get_all(self) -> Dict[str, str]:
        ...
