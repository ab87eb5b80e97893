"""
Cache Client Interface

Single capability interface implemented by the in-memory and the
relational-store-backed caches. Values must be JSON serialisable so every
implementation can persist them.
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Optional


class ICacheClient(ABC):
    """Interface for cache client implementations."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """
        Get a cached value.

        Args:
            key: Cache key

        Returns:
            The cached value, or None when missing or expired
        """
        pass

    @abstractmethod
    def set(
        self, key: str, value: Any, expires_in: Optional[timedelta] = None
    ) -> None:
        """
        Store a value, replacing any existing entry.

        Args:
            key: Cache key
            value: JSON serialisable value
            expires_in: Optional time to live, entries never expire without it
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove a cached value.

        Returns:
            True if an entry was removed
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    @abstractmethod
    def remove_by_prefix(self, prefix: str) -> int:
        """
        Remove every entry whose key starts with ``prefix``.

        Returns:
            Number of entries removed
        """
        pass
