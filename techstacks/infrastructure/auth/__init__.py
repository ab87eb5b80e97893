"""Authentication adapters - Infrastructure Layer."""

from .providers import GithubAuthProvider, OAuthProvider, TwitterAuthProvider
from .session_store import SESSION_COOKIE, SessionStore

__all__ = [
    "GithubAuthProvider",
    "OAuthProvider",
    "SESSION_COOKIE",
    "SessionStore",
    "TwitterAuthProvider",
]
