"""Application DTOs package."""

from .auth_dto import AuthenticateRequest, AuthenticateResult, SessionDTO
from .content_dto import TechnologyDTO, TechnologyStackDTO, UserProfileDTO
from .query_dto import QueryResponseDTO

__all__ = [
    "AuthenticateRequest",
    "AuthenticateResult",
    "QueryResponseDTO",
    "SessionDTO",
    "TechnologyDTO",
    "TechnologyStackDTO",
    "UserProfileDTO",
]
