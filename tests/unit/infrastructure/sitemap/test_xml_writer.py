from __future__ import annotations

from datetime import datetime, timezone
from xml.etree import ElementTree

from techstacks.domain.entities import (
    Sitemap,
    SitemapFrequency,
    SitemapIndex,
    SitemapUrl,
)
from techstacks.infrastructure.sitemap import (
    SITEMAP_NAMESPACE,
    write_sitemap_index,
    write_url_set,
)
from techstacks.shared import DateHandler

NS = {"sm": SITEMAP_NAMESPACE}
BUILT_AT = datetime(2015, 1, 21, 12, 0, tzinfo=timezone.utc)


def _parse(xml: str) -> ElementTree.Element:
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    return ElementTree.fromstring(xml.split("\n", 1)[1])


def test_write_sitemap_index_lists_every_sitemap() -> None:
    index = SitemapIndex(
        sitemaps=[
            Sitemap("/sitemap-techstacks.xml", BUILT_AT),
            Sitemap("/sitemap-users.xml", BUILT_AT),
        ]
    )

    root = _parse(write_sitemap_index(index, "http://techstacks.io/"))

    assert [loc.text for loc in root.findall("sm:sitemap/sm:loc", NS)] == [
        "http://techstacks.io/sitemap-techstacks.xml",
        "http://techstacks.io/sitemap-users.xml",
    ]
    assert root.find("sm:sitemap/sm:lastmod", NS).text == "2015-01-21T12:00:00Z"


def test_write_url_set_preserves_order_and_fields() -> None:
    sitemap = Sitemap(
        "/sitemap-techstacks.xml",
        BUILT_AT,
        [
            SitemapUrl("http://techstacks.io/b", BUILT_AT, SitemapFrequency.WEEKLY),
            SitemapUrl("http://techstacks.io/a", None, None, priority=0.5),
        ],
    )

    root = _parse(write_url_set(sitemap))

    urls = root.findall("sm:url", NS)
    assert [url.find("sm:loc", NS).text for url in urls] == [
        "http://techstacks.io/b",
        "http://techstacks.io/a",
    ]
    assert urls[0].find("sm:changefreq", NS).text == "weekly"
    assert urls[1].find("sm:lastmod", NS) is None
    assert urls[1].find("sm:priority", NS).text == "0.5"


def test_write_url_set_unix_time_dates() -> None:
    sitemap = Sitemap("/s.xml", BUILT_AT, [SitemapUrl("http://x/a", BUILT_AT)])

    root = _parse(write_url_set(sitemap, DateHandler.UNIX_TIME))

    assert root.find("sm:url/sm:lastmod", NS).text == str(int(BUILT_AT.timestamp()))
