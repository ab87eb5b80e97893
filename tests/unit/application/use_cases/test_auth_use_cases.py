from __future__ import annotations

from typing import Mapping
from urllib.parse import parse_qs, urlsplit

import pytest

from techstacks.application.dtos.auth_dto import AuthenticateRequest
from techstacks.application.models.host_config import HostConfig
from techstacks.application.use_cases.auth_use_cases import (
    AuthenticateUseCase,
    GetSessionUseCase,
    LogoutUseCase,
)
from techstacks.domain.entities import AuthTokens
from techstacks.domain.entities.errors import (
    AuthenticationError,
    EntityNotFoundError,
    RequestValidationError,
)
from techstacks.domain.ports.auth_provider import IAuthProvider
from techstacks.domain.ports.cache_client import ICacheClient
from techstacks.domain.services.validation import ValidatorRegistry
from techstacks.infrastructure.auth import SessionStore
from techstacks.infrastructure.cache import MemoryCacheClient
from techstacks.infrastructure.repositories import SqlUserAuthRepository
from techstacks.presentation.validators import VALIDATORS


class _FakeProvider(IAuthProvider):
    provider = "fake"
    redirect_url = "http://techstacks.io/"
    callback_url = "http://techstacks.io/auth/fake"

    def __init__(self, failure: str | None = None):
        self.failure = failure

    def is_callback(self, params: Mapping[str, str]) -> bool:
        return "code" in params

    async def authorize(self, state_store: ICacheClient) -> str:
        return "https://provider/authorize?state=s"

    async def authenticate(
        self, params: Mapping[str, str], state_store: ICacheClient
    ) -> AuthTokens:
        if self.failure:
            raise AuthenticationError("rejected", reason=self.failure)
        return AuthTokens(
            provider="fake", user_id="1", user_name="demis", display_name="Demis"
        )


@pytest.fixture()
def user_auth_repository(connection_factory) -> SqlUserAuthRepository:
    repository = SqlUserAuthRepository(connection_factory)
    repository.init_schema()
    return repository


@pytest.fixture()
def session_store() -> SessionStore:
    return SessionStore(MemoryCacheClient())


def _use_case(
    user_auth_repository,
    session_store,
    provider=None,
    host_config=None,
) -> AuthenticateUseCase:
    registry = ValidatorRegistry()
    registry.register_all(VALIDATORS)
    return AuthenticateUseCase(
        auth_providers=[provider or _FakeProvider()],
        user_auth_repository=user_auth_repository,
        session_store=session_store,
        state_store=MemoryCacheClient(),
        validator_registry=registry,
        host_config=host_config or HostConfig(),
    )


@pytest.mark.asyncio
async def test_first_leg_redirects_to_provider(user_auth_repository, session_store):
    use_case = _use_case(user_auth_repository, session_store)

    result = await use_case.execute(AuthenticateRequest(provider="fake"))

    assert result.redirect_url == "https://provider/authorize?state=s"
    assert result.session is None


@pytest.mark.asyncio
async def test_callback_creates_user_and_session(user_auth_repository, session_store):
    use_case = _use_case(user_auth_repository, session_store)

    result = await use_case.execute(
        AuthenticateRequest(provider="fake", params={"code": "c", "state": "s"})
    )

    assert result.redirect_url == "http://techstacks.io/?s=1"
    assert result.session.is_authenticated
    assert result.session.user_name == "demis"
    assert session_store.get(result.session.id) == result.session
    assert user_auth_repository.get_user_auth_by_user_name("demis") is not None


@pytest.mark.asyncio
async def test_failure_redirects_with_reason(user_auth_repository, session_store):
    use_case = _use_case(
        user_auth_repository, session_store, provider=_FakeProvider("AccessDenied")
    )

    result = await use_case.execute(
        AuthenticateRequest(provider="fake", params={"code": "c", "state": "s"})
    )

    assert parse_qs(urlsplit(result.redirect_url).query) == {"f": ["AccessDenied"]}
    assert result.session is None


@pytest.mark.asyncio
async def test_redirect_params_in_fragment_when_configured(
    user_auth_repository, session_store
):
    use_case = _use_case(
        user_auth_repository,
        session_store,
        host_config=HostConfig(add_redirect_params_to_query_string=False),
    )

    result = await use_case.execute(
        AuthenticateRequest(provider="fake", params={"code": "c", "state": "s"})
    )

    assert result.redirect_url == "http://techstacks.io/#s=1"


@pytest.mark.asyncio
async def test_unknown_provider(user_auth_repository, session_store):
    use_case = _use_case(user_auth_repository, session_store)

    with pytest.raises(EntityNotFoundError):
        await use_case.execute(AuthenticateRequest(provider="myspace"))


@pytest.mark.asyncio
async def test_malformed_callback_is_rejected(user_auth_repository, session_store):
    use_case = _use_case(user_auth_repository, session_store)

    with pytest.raises(RequestValidationError):
        await use_case.execute(AuthenticateRequest(provider="fake", params={"code": "c"}))


def test_get_session_and_logout(session_store):
    session = session_store.new_session()
    session.is_authenticated = True
    session.user_name = "demis"
    session_store.save(session)

    dto = GetSessionUseCase(session_store).execute(session.id)
    assert dto.session_id == session.id
    assert dto.user_name == "demis"

    assert LogoutUseCase(session_store).execute(session.id) is True
    with pytest.raises(AuthenticationError) as exc_info:
        GetSessionUseCase(session_store).execute(session.id)
    assert exc_info.value.reason == "Unauthorized"
