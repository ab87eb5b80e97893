"""
Sitemap Router - Presentation Layer

Serves the sitemap index and the sitemaps declared at startup.
"""

from fastapi import APIRouter, HTTPException, Request, Response, status

from techstacks.application.models.host_config import HostConfig
from techstacks.domain.entities.sitemap import SitemapIndex
from techstacks.infrastructure.sitemap import write_sitemap_index, write_url_set

XML_MEDIA_TYPE = "application/xml"


def create_sitemap_router(index: SitemapIndex, host_config: HostConfig) -> APIRouter:
    """Build a router exposing ``index`` and every sitemap it lists."""
    router = APIRouter(tags=["Sitemap"])

    @router.get(index.at_path, include_in_schema=False)
    async def get_sitemap_index() -> Response:
        return Response(
            write_sitemap_index(
                index, host_config.web_host_url, host_config.date_handler
            ),
            media_type=XML_MEDIA_TYPE,
        )

    async def get_sitemap(request: Request) -> Response:
        sitemap = index.find(request.url.path)
        if sitemap is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return Response(
            write_url_set(sitemap, host_config.date_handler),
            media_type=XML_MEDIA_TYPE,
        )

    for path in index.paths:
        router.add_api_route(
            path, get_sitemap, methods=["GET"], include_in_schema=False
        )

    return router
