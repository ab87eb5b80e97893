"""Content cache used by the server-rendered pages."""

from datetime import timedelta
from typing import Any, Callable, Optional, TypeVar

from techstacks.domain.ports.cache_client import ICacheClient

T = TypeVar("T")

DEFAULT_EXPIRY = timedelta(minutes=10)


class ContentCache:
    """Namespaced wrapper over a cache client for rendered page data."""

    PREFIX = "content:"

    def __init__(
        self, cache_client: ICacheClient, default_expiry: timedelta = DEFAULT_EXPIRY
    ):
        self.cache_client = cache_client
        self.default_expiry = default_expiry

    def _key(self, key: str) -> str:
        return f"{self.PREFIX}{key}"

    def get(self, key: str) -> Optional[Any]:
        return self.cache_client.get(self._key(key))

    def get_or_create(
        self,
        key: str,
        factory: Callable[[], T],
        expires_in: Optional[timedelta] = None,
    ) -> T:
        """
        Return the cached value for ``key``, computing and storing it on a miss.

        ``None`` results are not cached so missing content is looked up again.
        """
        cached = self.cache_client.get(self._key(key))
        if cached is not None:
            return cached

        value = factory()
        if value is not None:
            self.cache_client.set(
                self._key(key), value, expires_in or self.default_expiry
            )
        return value

    def invalidate(self, key: str) -> bool:
        return self.cache_client.delete(self._key(key))

    def clear(self) -> int:
        """Drop every page entry, leaving other keys of the client untouched."""
        return self.cache_client.remove_by_prefix(self.PREFIX)
