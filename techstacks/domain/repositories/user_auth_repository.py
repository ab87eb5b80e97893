"""
User Auth Repository Interface

Relational store for users that signed in through an external provider.
Methods taking ``conn`` run inside the caller's connection scope when one is
given and lease their own connection otherwise.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from techstacks.domain.entities.user import AuthTokens, UserAuth, UserAuthDetails


class IUserAuthRepository(ABC):
    """Interface for user auth repository implementations."""

    @abstractmethod
    def init_schema(self) -> None:
        """Create the user auth tables if they do not exist."""
        pass

    @abstractmethod
    def get_user_auth(self, user_auth_id: int) -> Optional[UserAuth]:
        pass

    @abstractmethod
    def get_user_auth_by_user_name(self, user_name: str) -> Optional[UserAuth]:
        pass

    @abstractmethod
    def get_user_auth_details(self, user_auth_id: int) -> List[UserAuthDetails]:
        pass

    @abstractmethod
    def create_or_merge_auth_session(self, tokens: AuthTokens) -> UserAuth:
        """
        Persist the outcome of a provider sign-in.

        Creates the user on first sign-in, otherwise refreshes the stored
        profile and tokens for that provider.

        Returns:
            The stored user
        """
        pass

    @abstractmethod
    def find_users_by_modified_desc(self, conn: Any = None) -> List[UserAuth]:
        """Return every user, most recently modified first."""
        pass
