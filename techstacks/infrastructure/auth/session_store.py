"""Sessions kept in the cache client, keyed by the ``ss-id`` cookie."""

from datetime import timedelta
from typing import Callable, Optional

from techstacks.domain.entities.user import UserSession
from techstacks.domain.ports.cache_client import ICacheClient

SESSION_COOKIE = "ss-id"
SESSION_KEY_PREFIX = "urn:iauthsession:"
DEFAULT_SESSION_EXPIRY = timedelta(days=14)


class SessionStore:
    """Persist ``UserSession`` objects through the cache client."""

    def __init__(
        self,
        cache_client: ICacheClient,
        session_factory: Callable[[], UserSession] = UserSession,
        expires_in: timedelta = DEFAULT_SESSION_EXPIRY,
    ):
        self.cache_client = cache_client
        self.session_factory = session_factory
        self.expires_in = expires_in

    @staticmethod
    def key_for(session_id: str) -> str:
        return f"{SESSION_KEY_PREFIX}{session_id}"

    def new_session(self) -> UserSession:
        return self.session_factory()

    def get(self, session_id: Optional[str]) -> Optional[UserSession]:
        if not session_id:
            return None
        data = self.cache_client.get(self.key_for(session_id))
        return UserSession.from_dict(data) if data else None

    def save(self, session: UserSession) -> None:
        self.cache_client.set(
            self.key_for(session.id), session.to_dict(), self.expires_in
        )

    def delete(self, session_id: Optional[str]) -> bool:
        if not session_id:
            return False
        return self.cache_client.delete(self.key_for(session_id))
