"""Host configuration consumed by the application and presentation layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from techstacks.shared.consts import DateHandler

DEFAULT_WEB_HOST_URL = "http://techstacks.io"
DEFAULT_QUERY_MAX_LIMIT = 200


@dataclass(frozen=True)
class HostConfig:
    """Immutable host metadata, built once at startup and passed down."""

    web_host_url: str = DEFAULT_WEB_HOST_URL
    add_redirect_params_to_query_string: bool = True
    date_handler: DateHandler = DateHandler.ISO8601
    query_max_limit: int = DEFAULT_QUERY_MAX_LIMIT
    not_found_paths: Tuple[str, ...] = ("/robots.txt",)
    app_name: str = "TechStacks"

    def absolute_url(self, path: str) -> str:
        """Join ``path`` onto the public base URL (used for sitemap links)."""
        return f"{self.web_host_url.rstrip('/')}/{path.lstrip('/')}"
