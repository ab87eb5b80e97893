"""
External identity providers - Infrastructure Layer

GitHub signs users in with OAuth 2 (authorization code), Twitter with
OAuth 1.0a. Pending requests are kept in the cache client for ten minutes
between the redirect to the provider and its callback.
"""

from __future__ import annotations

import secrets
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

import httpx

from techstacks.domain.entities.errors import AuthenticationError
from techstacks.domain.entities.user import AuthTokens
from techstacks.domain.ports.auth_provider import IAuthProvider
from techstacks.domain.ports.cache_client import ICacheClient
from techstacks.shared import get_logger

from .oauth1 import authorization_header

logger = get_logger(__name__)

PENDING_REQUEST_EXPIRY = timedelta(minutes=10)
DEFAULT_GITHUB_SCOPES = "user"


class OAuthProvider(IAuthProvider):
    """Settings shared by the OAuth providers."""

    provider = ""

    def __init__(
        self,
        consumer_key: Optional[str],
        consumer_secret: Optional[str],
        redirect_url: str,
        callback_url: str,
        timeout: float = 30.0,
    ):
        self.consumer_key = consumer_key or ""
        self.consumer_secret = consumer_secret or ""
        self.redirect_url = redirect_url
        self.callback_url = callback_url
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.consumer_key and self.consumer_secret)

    def _ensure_configured(self) -> None:
        if not self.is_configured:
            raise AuthenticationError(
                f"{self.provider} sign-in is not configured",
                reason="ProviderNotConfigured",
            )


class GithubAuthProvider(OAuthProvider):
    """OAuth 2 authorization code flow against GitHub."""

    provider = "github"
    authorize_url = "https://github.com/login/oauth/authorize"
    access_token_url = "https://github.com/login/oauth/access_token"
    user_profile_url = "https://api.github.com/user"

    def __init__(
        self,
        consumer_key: Optional[str],
        consumer_secret: Optional[str],
        redirect_url: str,
        callback_url: str,
        scopes: Optional[str] = None,
        timeout: float = 30.0,
    ):
        super().__init__(
            consumer_key, consumer_secret, redirect_url, callback_url, timeout
        )
        self.scopes = scopes or DEFAULT_GITHUB_SCOPES

    @staticmethod
    def _state_key(state: str) -> str:
        return f"urn:oauth:github:state:{state}"

    def is_callback(self, params: Mapping[str, str]) -> bool:
        return "code" in params or "error" in params

    async def authorize(self, state_store: ICacheClient) -> str:
        self._ensure_configured()
        state = secrets.token_urlsafe(16)
        state_store.set(
            self._state_key(state), {"provider": self.provider}, PENDING_REQUEST_EXPIRY
        )
        query = urlencode(
            {
                "client_id": self.consumer_key,
                "redirect_uri": self.callback_url,
                "scope": self.scopes,
                "state": state,
            }
        )
        return f"{self.authorize_url}?{query}"

    async def _exchange(self, code: str) -> Tuple[str, Dict[str, Any]]:
        """Trade the authorization code for a token, then fetch the profile."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            token_response = await client.post(
                self.access_token_url,
                data={
                    "client_id": self.consumer_key,
                    "client_secret": self.consumer_secret,
                    "code": code,
                    "redirect_uri": self.callback_url,
                },
                headers={"Accept": "application/json"},
            )
            token_response.raise_for_status()
            token_data: Dict[str, Any] = token_response.json()

            access_token = token_data.get("access_token")
            if not access_token:
                raise AuthenticationError(
                    "GitHub did not issue an access token",
                    reason=str(token_data.get("error", "AccessTokenFailed")),
                )

            profile_response = await client.get(
                self.user_profile_url,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/vnd.github+json",
                },
            )
            profile_response.raise_for_status()
            return access_token, profile_response.json()

    async def authenticate(
        self, params: Mapping[str, str], state_store: ICacheClient
    ) -> AuthTokens:
        if "error" in params:
            raise AuthenticationError(
                "GitHub sign-in was denied", reason="AccessDenied"
            )

        state = params.get("state", "")
        if not state or state_store.get(self._state_key(state)) is None:
            raise AuthenticationError(
                "GitHub callback does not match a pending sign-in",
                reason="InvalidState",
            )
        state_store.delete(self._state_key(state))

        try:
            access_token, profile = await self._exchange(params.get("code", ""))
        except httpx.HTTPError as exc:
            logger.warning("auth.github.exchange.failed", error=str(exc))
            raise AuthenticationError(
                "GitHub rejected the access token exchange",
                reason="AccessTokenFailed",
            ) from exc

        logger.info("auth.github.authenticated", user_name=profile.get("login"))
        return AuthTokens(
            provider=self.provider,
            user_id=str(profile["id"]),
            user_name=profile["login"],
            display_name=profile.get("name") or profile["login"],
            email=profile.get("email"),
            profile_url=profile.get("avatar_url"),
            access_token=access_token,
        )


class TwitterAuthProvider(OAuthProvider):
    """OAuth 1.0a three-legged flow against Twitter."""

    provider = "twitter"
    request_token_url = "https://api.twitter.com/oauth/request_token"
    authenticate_url = "https://api.twitter.com/oauth/authenticate"
    access_token_url = "https://api.twitter.com/oauth/access_token"

    @staticmethod
    def _token_key(oauth_token: str) -> str:
        return f"urn:oauth:twitter:token:{oauth_token}"

    def is_callback(self, params: Mapping[str, str]) -> bool:
        return "oauth_token" in params or "denied" in params

    async def _signed_post(
        self,
        url: str,
        token: Optional[str] = None,
        token_secret: Optional[str] = None,
        extra_oauth_params: Optional[Mapping[str, str]] = None,
        failure_reason: str = "AccessTokenFailed",
    ) -> Dict[str, str]:
        """
        POST an OAuth1-signed request and parse the form-encoded answer.

        Raises:
            AuthenticationError: If Twitter answers with an error status or
                cannot be reached, with ``failure_reason`` as the reason
        """
        header = authorization_header(
            "POST",
            url,
            self.consumer_key,
            self.consumer_secret,
            token=token,
            token_secret=token_secret,
            extra_oauth_params=extra_oauth_params,
        )
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, headers={"Authorization": header})
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("auth.twitter.request.failed", url=url, error=str(exc))
            raise AuthenticationError(
                "Twitter rejected the token request", reason=failure_reason
            ) from exc
        return dict(parse_qsl(response.text))

    async def authorize(self, state_store: ICacheClient) -> str:
        self._ensure_configured()
        data = await self._signed_post(
            self.request_token_url,
            extra_oauth_params={"oauth_callback": self.callback_url},
            failure_reason="RequestTokenFailed",
        )
        oauth_token = data.get("oauth_token")
        if not oauth_token:
            raise AuthenticationError(
                "Twitter did not issue a request token", reason="RequestTokenFailed"
            )

        state_store.set(
            self._token_key(oauth_token),
            {"token_secret": data.get("oauth_token_secret", "")},
            PENDING_REQUEST_EXPIRY,
        )
        return f"{self.authenticate_url}?{urlencode({'oauth_token': oauth_token})}"

    async def authenticate(
        self, params: Mapping[str, str], state_store: ICacheClient
    ) -> AuthTokens:
        if "denied" in params:
            raise AuthenticationError(
                "Twitter sign-in was denied", reason="AccessDenied"
            )

        oauth_token = params.get("oauth_token", "")
        pending = state_store.get(self._token_key(oauth_token)) if oauth_token else None
        if pending is None:
            raise AuthenticationError(
                "Twitter callback does not match a pending sign-in",
                reason="InvalidState",
            )
        state_store.delete(self._token_key(oauth_token))

        data = await self._signed_post(
            self.access_token_url,
            token=oauth_token,
            token_secret=pending.get("token_secret"),
            extra_oauth_params={"oauth_verifier": params.get("oauth_verifier", "")},
        )
        if not data.get("oauth_token") or not data.get("user_id"):
            raise AuthenticationError(
                "Twitter did not issue an access token", reason="AccessTokenFailed"
            )

        screen_name = data.get("screen_name", data["user_id"])
        logger.info("auth.twitter.authenticated", user_name=screen_name)
        return AuthTokens(
            provider=self.provider,
            user_id=data["user_id"],
            user_name=screen_name,
            display_name=screen_name,
            profile_url=f"https://twitter.com/{screen_name}",
            access_token=data["oauth_token"],
            access_token_secret=data.get("oauth_token_secret"),
        )
