"""Cache clients - Infrastructure Layer."""

from .content_cache import ContentCache
from .memory_cache_client import MemoryCacheClient
from .sql_cache_client import SqlCacheClient

__all__ = ["ContentCache", "MemoryCacheClient", "SqlCacheClient"]
