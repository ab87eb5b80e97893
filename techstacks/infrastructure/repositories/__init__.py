"""
Repositories package - Infrastructure Layer

SQLAlchemy implementations of the domain repository contracts.
"""

from techstacks.infrastructure.repositories.content_repository import (
    SqlContentRepository,
)
from techstacks.infrastructure.repositories.query_repository import SqlQueryRepository
from techstacks.infrastructure.repositories.user_auth_repository import (
    SqlUserAuthRepository,
)

__all__ = ["SqlContentRepository", "SqlQueryRepository", "SqlUserAuthRepository"]
