"""In-process cache client."""

import copy
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from techstacks.domain.ports.cache_client import ICacheClient


class MemoryCacheClient(ICacheClient):
    """Dictionary backed cache; expired entries are dropped when read."""

    def __init__(self) -> None:
        self._entries: Dict[str, Tuple[Any, Optional[datetime]]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and expires_at <= datetime.now(timezone.utc):
                del self._entries[key]
                return None
            return copy.deepcopy(value)

    def set(
        self, key: str, value: Any, expires_in: Optional[timedelta] = None
    ) -> None:
        expires_at = (
            datetime.now(timezone.utc) + expires_in if expires_in is not None else None
        )
        with self._lock:
            self._entries[key] = (copy.deepcopy(value), expires_at)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def remove_by_prefix(self, prefix: str) -> int:
        with self._lock:
            keys = [key for key in self._entries if key.startswith(prefix)]
            for key in keys:
                del self._entries[key]
        return len(keys)
