"""
Controllers Package - Presentation Layer

FastAPI routers handling HTTP requests. Controllers build request objects,
call the application use cases and map domain errors to HTTP responses.
"""

from .auth_controller import router as auth_router
from .query_controller import router as query_router
from .sitemap_controller import create_sitemap_router
from .views_controller import router as views_router

__all__ = ["auth_router", "query_router", "views_router", "create_sitemap_router"]
