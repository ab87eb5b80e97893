"""
Auth Use Cases - Application Layer

Sign-in through the registered identity providers and session lookup.
"""

from typing import Dict, Iterable, Optional
from urllib.parse import urlencode

from techstacks.application.dtos.auth_dto import (
    AuthenticateRequest,
    AuthenticateResult,
    SessionDTO,
)
from techstacks.application.models.host_config import HostConfig
from techstacks.domain.entities.errors import AuthenticationError, EntityNotFoundError
from techstacks.domain.entities.user import UserSession
from techstacks.domain.ports.auth_provider import IAuthProvider
from techstacks.domain.ports.cache_client import ICacheClient
from techstacks.domain.repositories.user_auth_repository import IUserAuthRepository
from techstacks.domain.services.validation import ValidatorRegistry
from techstacks.infrastructure.auth.session_store import SessionStore
from techstacks.shared import get_logger

logger = get_logger(__name__)


class AuthenticateUseCase:
    """Use case driving the redirect round trip with a provider."""

    def __init__(
        self,
        auth_providers: Iterable[IAuthProvider],
        user_auth_repository: IUserAuthRepository,
        session_store: SessionStore,
        state_store: ICacheClient,
        validator_registry: ValidatorRegistry,
        host_config: HostConfig,
    ):
        self.auth_providers: Dict[str, IAuthProvider] = {
            provider.provider: provider for provider in auth_providers
        }
        self.user_auth_repository = user_auth_repository
        self.session_store = session_store
        self.state_store = state_store
        self.validator_registry = validator_registry
        self.host_config = host_config

    def get_provider(self, name: str) -> IAuthProvider:
        provider = self.auth_providers.get(name.lower())
        if provider is None:
            raise EntityNotFoundError("AuthProvider", name)
        return provider

    def _redirect(self, url: str, params: Dict[str, str]) -> str:
        encoded = urlencode(params)
        if self.host_config.add_redirect_params_to_query_string:
            separator = "&" if "?" in url else "?"
            return f"{url}{separator}{encoded}"
        return f"{url}#{encoded}"

    async def execute(
        self, request: AuthenticateRequest, session: Optional[UserSession] = None
    ) -> AuthenticateResult:
        """
        Start or complete a sign-in.

        Without callback parameters the result redirects to the provider.
        With them, the provider tokens are exchanged, the user is stored and
        the session is saved; failures redirect back with ``f=<reason>``.

        Raises:
            RequestValidationError: If the callback parameters are malformed
            EntityNotFoundError: If the provider is not registered
        """
        self.validator_registry.validate(request)
        provider = self.get_provider(request.provider)

        if not provider.is_callback(request.params):
            redirect_url = await provider.authorize(self.state_store)
            logger.info("auth.redirect", provider=provider.provider)
            return AuthenticateResult(redirect_url=redirect_url, session=session)

        try:
            tokens = await provider.authenticate(request.params, self.state_store)
        except AuthenticationError as exc:
            logger.warning(
                "auth.failed", provider=provider.provider, reason=exc.reason
            )
            return AuthenticateResult(
                redirect_url=self._redirect(provider.redirect_url, {"f": exc.reason}),
                session=session,
            )

        user = self.user_auth_repository.create_or_merge_auth_session(tokens)

        session = session or self.session_store.new_session()
        session.user_auth_id = user.id
        session.user_name = user.user_name
        session.display_name = user.display_name or user.user_name
        session.profile_url = user.default_profile_url
        session.provider = provider.provider
        session.is_authenticated = True
        self.session_store.save(session)

        logger.info(
            "auth.session.created", provider=provider.provider, user_auth_id=user.id
        )
        return AuthenticateResult(
            redirect_url=self._redirect(provider.redirect_url, {"s": "1"}),
            session=session,
        )


class GetSessionUseCase:
    """Use case returning the signed-in session."""

    def __init__(self, session_store: SessionStore):
        self.session_store = session_store

    def execute(self, session_id: Optional[str]) -> SessionDTO:
        session = self.session_store.get(session_id)
        if session is None or not session.is_authenticated:
            raise AuthenticationError("Not authenticated", reason="Unauthorized")
        return SessionDTO.from_session(session)


class LogoutUseCase:
    def __init__(self, session_store: SessionStore):
        self.session_store = session_store

    def execute(self, session_id: Optional[str]) -> bool:
        removed = self.session_store.delete(session_id)
        logger.info("auth.logout", removed=removed)
        return removed
