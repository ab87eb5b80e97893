"""Application use cases package."""

from .auth_use_cases import AuthenticateUseCase, GetSessionUseCase, LogoutUseCase
from .content_use_cases import (
    GetHomePageUseCase,
    GetStackPageUseCase,
    GetTechnologyPageUseCase,
    GetUserPageUseCase,
)
from .query_use_cases import QUERY_DEFINITIONS, AutoQueryUseCase
from .sitemap_use_cases import BuildSitemapIndexUseCase

__all__ = [
    "AuthenticateUseCase",
    "AutoQueryUseCase",
    "BuildSitemapIndexUseCase",
    "GetHomePageUseCase",
    "GetSessionUseCase",
    "GetStackPageUseCase",
    "GetTechnologyPageUseCase",
    "GetUserPageUseCase",
    "LogoutUseCase",
    "QUERY_DEFINITIONS",
]
