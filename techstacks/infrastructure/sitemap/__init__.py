"""Sitemap serialisation - Infrastructure Layer."""

from .xml_writer import SITEMAP_NAMESPACE, write_sitemap_index, write_url_set

__all__ = ["SITEMAP_NAMESPACE", "write_sitemap_index", "write_url_set"]
