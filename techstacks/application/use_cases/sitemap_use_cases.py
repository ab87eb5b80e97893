"""
Sitemap Use Cases - Application Layer

Builds the sitemap index declared at startup: one sitemap per crawlable
content type, each listing its rows most recently modified first.
"""

from typing import Any, Callable, Iterable, List, TypeVar
from urllib.parse import quote

from techstacks.application.models.host_config import HostConfig
from techstacks.domain.entities.sitemap import (
    Sitemap,
    SitemapFrequency,
    SitemapIndex,
    SitemapUrl,
)
from techstacks.domain.repositories.content_repository import IContentRepository
from techstacks.domain.repositories.user_auth_repository import IUserAuthRepository
from techstacks.shared import get_logger, utcnow

logger = get_logger(__name__)

T = TypeVar("T")

TECHSTACKS_SITEMAP_PATH = "/sitemap-techstacks.xml"
TECHNOLOGIES_SITEMAP_PATH = "/sitemap-technologies.xml"
USERS_SITEMAP_PATH = "/sitemap-users.xml"

STACK_URL_TEMPLATE = "/{slug}"
TECHNOLOGY_URL_TEMPLATE = "/tech/{slug}"
USER_URL_TEMPLATE = "/users/{user_name}"


def _path(template: str, **values: str) -> str:
    return template.format(
        **{key: quote(value, safe="") for key, value in values.items()}
    )


class BuildSitemapIndexUseCase:
    """Use case computing the sitemap index from the database."""

    def __init__(
        self,
        content_repository: IContentRepository,
        user_auth_repository: IUserAuthRepository,
        host_config: HostConfig,
    ):
        self.content_repository = content_repository
        self.user_auth_repository = user_auth_repository
        self.host_config = host_config

    def _url_set(
        self,
        rows: Iterable[T],
        location: Callable[[T], str],
        last_modified: Callable[[T], Any],
    ) -> List[SitemapUrl]:
        ordered = sorted(rows, key=last_modified, reverse=True)
        return [
            SitemapUrl(
                location=self.host_config.absolute_url(location(row)),
                last_modified=last_modified(row),
                change_frequency=SitemapFrequency.WEEKLY,
            )
            for row in ordered
        ]

    def execute(self, conn: Any = None) -> SitemapIndex:
        """
        Build the sitemap index.

        Args:
            conn: Connection scope to read from, a new one is leased when omitted

        Returns:
            Index with the techstacks, technologies and users sitemaps
        """
        built_at = utcnow()

        stacks = self._url_set(
            self.content_repository.list_stacks_by_modified_desc(conn),
            lambda stack: _path(STACK_URL_TEMPLATE, slug=stack.slug),
            lambda stack: stack.last_modified,
        )
        technologies = self._url_set(
            self.content_repository.list_technologies_by_modified_desc(conn),
            lambda tech: _path(TECHNOLOGY_URL_TEMPLATE, slug=tech.slug),
            lambda tech: tech.last_modified,
        )
        users = self._url_set(
            self.user_auth_repository.find_users_by_modified_desc(conn),
            lambda user: _path(USER_URL_TEMPLATE, user_name=user.user_name),
            lambda user: user.modified_date,
        )

        index = SitemapIndex(
            sitemaps=[
                Sitemap(TECHSTACKS_SITEMAP_PATH, built_at, stacks),
                Sitemap(TECHNOLOGIES_SITEMAP_PATH, built_at, technologies),
                Sitemap(USERS_SITEMAP_PATH, built_at, users),
            ]
        )
        logger.info(
            "sitemap.index.built",
            techstacks=len(stacks),
            technologies=len(technologies),
            users=len(users),
        )
        return index
