"""
Domain Entities - Sitemap

Transient projections of content rows, computed at startup and served to
crawlers. Nothing here is persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class SitemapFrequency(str, Enum):
    """``changefreq`` hint of the sitemaps.org protocol."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True)
class SitemapUrl:
    location: str
    last_modified: Optional[datetime] = None
    change_frequency: Optional[SitemapFrequency] = None
    priority: Optional[float] = None


@dataclass
class Sitemap:
    """One ``urlset`` document served at ``at_path``."""

    at_path: str
    last_modified: Optional[datetime] = None
    url_set: List[SitemapUrl] = field(default_factory=list)


@dataclass
class SitemapIndex:
    """All sitemaps declared for the site, served from ``/sitemap.xml``."""

    sitemaps: List[Sitemap] = field(default_factory=list)
    at_path: str = "/sitemap.xml"

    def find(self, path: str) -> Optional[Sitemap]:
        for sitemap in self.sitemaps:
            if sitemap.at_path == path:
                return sitemap
        return None

    @property
    def paths(self) -> List[str]:
        return [sitemap.at_path for sitemap in self.sitemaps]
