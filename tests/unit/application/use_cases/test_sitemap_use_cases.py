from __future__ import annotations

from datetime import datetime, timedelta, timezone

from techstacks.application.models.host_config import HostConfig
from techstacks.application.use_cases.sitemap_use_cases import (
    TECHNOLOGIES_SITEMAP_PATH,
    TECHSTACKS_SITEMAP_PATH,
    USERS_SITEMAP_PATH,
    BuildSitemapIndexUseCase,
)
from techstacks.domain.entities import SitemapFrequency
from techstacks.infrastructure.repositories import (
    SqlContentRepository,
    SqlUserAuthRepository,
)

BASE_TIME = datetime(2015, 1, 1, tzinfo=timezone.utc)


def _use_case(connection_factory, host_config=None) -> BuildSitemapIndexUseCase:
    return BuildSitemapIndexUseCase(
        SqlContentRepository(connection_factory),
        SqlUserAuthRepository(connection_factory),
        host_config or HostConfig(),
    )


def test_declares_three_sitemaps(seed, connection_factory) -> None:
    index = _use_case(connection_factory).execute()

    assert index.paths == [
        TECHSTACKS_SITEMAP_PATH,
        TECHNOLOGIES_SITEMAP_PATH,
        USERS_SITEMAP_PATH,
    ]
    assert all(sitemap.url_set == [] for sitemap in index.sitemaps)
    assert all(sitemap.last_modified is not None for sitemap in index.sitemaps)


def test_stack_entries_are_sorted_most_recent_first(seed, connection_factory) -> None:
    slugs = ["alpha", "bravo", "charlie", "delta"]
    for minutes, slug in enumerate(slugs):
        seed.stack(slug, BASE_TIME + timedelta(minutes=minutes))

    with connection_factory.open_connection() as conn:
        index = _use_case(connection_factory).execute(conn)

    urls = index.find(TECHSTACKS_SITEMAP_PATH).url_set
    assert len(urls) == len(slugs)
    assert [url.location for url in urls] == [
        f"http://techstacks.io/{slug}" for slug in reversed(slugs)
    ]
    assert all(url.change_frequency is SitemapFrequency.WEEKLY for url in urls)
    assert [url.last_modified for url in urls] == sorted(
        (url.last_modified for url in urls), reverse=True
    )


def test_technology_and_user_url_templates(seed, connection_factory) -> None:
    seed.technology("redis")
    seed.user("demis bellot")
    host_config = HostConfig(web_host_url="https://example.org/")

    index = _use_case(connection_factory, host_config).execute()

    assert [url.location for url in index.find(TECHNOLOGIES_SITEMAP_PATH).url_set] == [
        "https://example.org/tech/redis"
    ]
    assert [url.location for url in index.find(USERS_SITEMAP_PATH).url_set] == [
        "https://example.org/users/demis%20bellot"
    ]
