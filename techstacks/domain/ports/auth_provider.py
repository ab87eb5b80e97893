"""
Auth Provider Interface

External identity providers sign users in through a redirect round trip:
``authorize`` produces the provider URL to send the browser to and
``authenticate`` turns the callback parameters into ``AuthTokens``.
"""

from abc import ABC, abstractmethod
from typing import Mapping

from techstacks.domain.entities.user import AuthTokens
from techstacks.domain.ports.cache_client import ICacheClient


class IAuthProvider(ABC):
    """Interface for OAuth style identity providers."""

    provider: str
    redirect_url: str
    callback_url: str

    @abstractmethod
    def is_callback(self, params: Mapping[str, str]) -> bool:
        """Return True when ``params`` come back from the provider."""
        pass

    @abstractmethod
    async def authorize(self, state_store: ICacheClient) -> str:
        """
        Start a sign-in.

        Args:
            state_store: Cache used to keep the pending request state

        Returns:
            URL the browser must be redirected to
        """
        pass

    @abstractmethod
    async def authenticate(
        self, params: Mapping[str, str], state_store: ICacheClient
    ) -> AuthTokens:
        """
        Complete a sign-in from the callback parameters.

        Raises:
            AuthenticationError: If the provider denied access or the state
                does not match a pending request
        """
        pass
