from __future__ import annotations

from techstacks.domain.entities import UserSession
from techstacks.infrastructure.auth import SessionStore
from techstacks.infrastructure.cache import MemoryCacheClient


def test_save_get_and_delete_session() -> None:
    cache = MemoryCacheClient()
    store = SessionStore(cache)
    session = store.new_session()
    session.user_name = "demis"
    session.is_authenticated = True

    store.save(session)

    assert cache.get(f"urn:iauthsession:{session.id}") is not None
    assert store.get(session.id) == session
    assert store.delete(session.id) is True
    assert store.get(session.id) is None


def test_missing_session_ids() -> None:
    store = SessionStore(MemoryCacheClient())

    assert store.get(None) is None
    assert store.get("unknown") is None
    assert store.delete(None) is False


def test_custom_session_factory() -> None:
    class _Session(UserSession):
        pass

    store = SessionStore(MemoryCacheClient(), session_factory=_Session)

    assert isinstance(store.new_session(), _Session)
