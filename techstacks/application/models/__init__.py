"""Application models package."""

from .host_config import DEFAULT_QUERY_MAX_LIMIT, DEFAULT_WEB_HOST_URL, HostConfig

__all__ = ["DEFAULT_QUERY_MAX_LIMIT", "DEFAULT_WEB_HOST_URL", "HostConfig"]
