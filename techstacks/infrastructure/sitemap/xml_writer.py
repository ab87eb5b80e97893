"""
Sitemap XML - Infrastructure Layer

Serialises sitemap entities to the sitemaps.org 0.9 protocol.
"""

from typing import Optional
from xml.etree import ElementTree

from techstacks.domain.entities.sitemap import Sitemap, SitemapIndex
from techstacks.shared import DateHandler, format_datetime

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _to_xml(root: ElementTree.Element) -> str:
    body = ElementTree.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'


def _add_text(
    parent: ElementTree.Element, tag: str, value: Optional[str]
) -> None:
    if value is not None:
        ElementTree.SubElement(parent, tag).text = value


def write_sitemap_index(
    index: SitemapIndex,
    base_url: str,
    date_handler: DateHandler = DateHandler.ISO8601,
) -> str:
    """Render the ``sitemapindex`` document listing every sitemap."""
    root = ElementTree.Element("sitemapindex", xmlns=SITEMAP_NAMESPACE)
    for sitemap in index.sitemaps:
        entry = ElementTree.SubElement(root, "sitemap")
        _add_text(entry, "loc", f"{base_url.rstrip('/')}{sitemap.at_path}")
        if sitemap.last_modified is not None:
            _add_text(
                entry, "lastmod", format_datetime(sitemap.last_modified, date_handler)
            )
    return _to_xml(root)


def write_url_set(
    sitemap: Sitemap, date_handler: DateHandler = DateHandler.ISO8601
) -> str:
    """Render the ``urlset`` document of one sitemap, preserving entry order."""
    root = ElementTree.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for url in sitemap.url_set:
        entry = ElementTree.SubElement(root, "url")
        _add_text(entry, "loc", url.location)
        if url.last_modified is not None:
            _add_text(entry, "lastmod", format_datetime(url.last_modified, date_handler))
        if url.change_frequency is not None:
            _add_text(entry, "changefreq", url.change_frequency.value)
        if url.priority is not None:
            _add_text(entry, "priority", f"{url.priority:.1f}")
    return _to_xml(root)
