"""
Domain Entities Package

Content records, users and sessions, sitemap projections, query-by-convention
requests and domain errors.
"""

from .errors import (
    AuthenticationError,
    ConfigurationError,
    DomainError,
    EntityNotFoundError,
    RequestValidationError,
)
from .query import QueryDefinition, QueryRequest, QueryResult
from .sitemap import Sitemap, SitemapFrequency, SitemapIndex, SitemapUrl
from .technology import (
    Technology,
    TechnologyChoice,
    TechnologyStack,
    TechnologyTier,
    UserFavoriteTechnology,
    UserFavoriteTechnologyStack,
)
from .user import AuthTokens, UserAuth, UserAuthDetails, UserSession

__all__ = [
    "AuthenticationError",
    "AuthTokens",
    "ConfigurationError",
    "DomainError",
    "EntityNotFoundError",
    "QueryDefinition",
    "QueryRequest",
    "QueryResult",
    "RequestValidationError",
    "Sitemap",
    "SitemapFrequency",
    "SitemapIndex",
    "SitemapUrl",
    "Technology",
    "TechnologyChoice",
    "TechnologyStack",
    "TechnologyTier",
    "UserAuth",
    "UserAuthDetails",
    "UserFavoriteTechnology",
    "UserFavoriteTechnologyStack",
    "UserSession",
]
