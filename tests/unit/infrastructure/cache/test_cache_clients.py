from __future__ import annotations

from datetime import timedelta

import pytest

from techstacks.infrastructure.cache import (
    ContentCache,
    MemoryCacheClient,
    SqlCacheClient,
)


@pytest.fixture()
def sql_cache(connection_factory) -> SqlCacheClient:
    client = SqlCacheClient(connection_factory)
    client.init_schema()
    return client


@pytest.fixture(params=["memory", "sql"])
def cache_client(request, connection_factory):
    if request.param == "memory":
        return MemoryCacheClient()
    client = SqlCacheClient(connection_factory)
    client.init_schema()
    return client


def test_set_then_get_returns_value(cache_client) -> None:
    cache_client.set("urn:key", {"name": "value", "items": [1, 2]})

    assert cache_client.get("urn:key") == {"name": "value", "items": [1, 2]}
    assert cache_client.get("urn:missing") is None


def test_set_replaces_existing_value(cache_client) -> None:
    cache_client.set("urn:key", 1)
    cache_client.set("urn:key", 2)

    assert cache_client.get("urn:key") == 2


def test_expired_entries_are_missing(cache_client) -> None:
    cache_client.set("urn:key", "value", expires_in=timedelta(seconds=-1))

    assert cache_client.get("urn:key") is None


def test_delete_and_clear(cache_client) -> None:
    cache_client.set("a", 1)
    cache_client.set("b", 2)

    assert cache_client.delete("a") is True
    assert cache_client.delete("a") is False

    cache_client.clear()
    assert cache_client.get("b") is None


def test_memory_cache_returns_copies() -> None:
    client = MemoryCacheClient()
    value = {"items": [1]}
    client.set("key", value)

    value["items"].append(2)
    client.get("key")["items"].append(3)

    assert client.get("key") == {"items": [1]}
    assert len(client) == 1


def test_sql_cache_init_schema_is_idempotent(sql_cache) -> None:
    sql_cache.set("key", "value")

    sql_cache.init_schema()

    assert sql_cache.get("key") == "value"


def test_sql_cache_remove_expired(sql_cache) -> None:
    sql_cache.set("old", 1, expires_in=timedelta(seconds=-1))
    sql_cache.set("fresh", 2, expires_in=timedelta(hours=1))
    sql_cache.set("forever", 3)

    assert sql_cache.remove_expired() == 1
    assert sql_cache.get("fresh") == 2
    assert sql_cache.get("forever") == 3


def test_sql_cache_survives_new_client(connection_factory, sql_cache) -> None:
    sql_cache.set("urn:iauthsession:abc", {"user_name": "demis"})

    other = SqlCacheClient(connection_factory)

    assert other.get("urn:iauthsession:abc") == {"user_name": "demis"}


def test_content_cache_get_or_create_computes_once() -> None:
    cache = ContentCache(MemoryCacheClient())
    calls = []

    def factory():
        calls.append(1)
        return {"page": "home"}

    assert cache.get_or_create("home", factory) == {"page": "home"}
    assert cache.get_or_create("home", factory) == {"page": "home"}
    assert len(calls) == 1
    assert cache.get("home") == {"page": "home"}


def test_content_cache_does_not_store_none() -> None:
    client = MemoryCacheClient()
    cache = ContentCache(client)

    assert cache.get_or_create("missing", lambda: None) is None
    assert len(client) == 0


def test_content_cache_invalidate_uses_namespace() -> None:
    client = MemoryCacheClient()
    cache = ContentCache(client)
    cache.get_or_create("stack:servicestack", lambda: {"id": 1})

    assert client.get("content:stack:servicestack") == {"id": 1}
    assert cache.invalidate("stack:servicestack") is True
    assert cache.get("stack:servicestack") is None


def test_remove_by_prefix_keeps_other_keys(cache_client) -> None:
    cache_client.set("content:home", {"page": "home"})
    cache_client.set("content:stack:50%_off", {"id": 1})
    cache_client.set("contentX", 0)
    cache_client.set("urn:iauthsession:abc", {"user_name": "demis"})

    assert cache_client.remove_by_prefix("content:") == 2
    assert cache_client.get("content:home") is None
    assert cache_client.get("contentX") == 0
    assert cache_client.get("urn:iauthsession:abc") == {"user_name": "demis"}


def test_content_cache_clear_leaves_sessions(sql_cache) -> None:
    cache = ContentCache(sql_cache)
    cache.get_or_create("home", lambda: {"page": "home"})
    sql_cache.set("urn:iauthsession:abc", {"user_name": "demis"})

    assert cache.clear() == 1
    assert cache.get("home") is None
    assert sql_cache.get("urn:iauthsession:abc") == {"user_name": "demis"}


def test_sql_cache_init_schema_purges_expired(sql_cache) -> None:
    sql_cache.set("urn:oauth:github:state:abandoned", {}, timedelta(seconds=-1))
    sql_cache.set("urn:iauthsession:live", {}, timedelta(hours=1))

    sql_cache.init_schema()

    assert sql_cache.remove_expired() == 0
    assert sql_cache.get("urn:iauthsession:live") == {}
