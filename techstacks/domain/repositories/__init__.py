"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .content_repository import IContentRepository
from .query_repository import IQueryRepository
from .user_auth_repository import IUserAuthRepository

__all__ = ["IContentRepository", "IQueryRepository", "IUserAuthRepository"]
