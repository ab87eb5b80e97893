from __future__ import annotations

import pytest

from techstacks.application.use_cases.content_use_cases import (
    GetHomePageUseCase,
    GetStackPageUseCase,
    GetTechnologyPageUseCase,
    GetUserPageUseCase,
)
from techstacks.domain.entities.errors import EntityNotFoundError
from techstacks.infrastructure.cache import ContentCache, MemoryCacheClient
from techstacks.infrastructure.repositories import (
    SqlContentRepository,
    SqlUserAuthRepository,
)


@pytest.fixture()
def content_cache() -> ContentCache:
    return ContentCache(MemoryCacheClient())


@pytest.fixture()
def content_repository(seed, connection_factory) -> SqlContentRepository:
    stack_id = seed.stack("techstacks", name="TechStacks")
    redis_id = seed.technology("redis", name="Redis", tier="Data")
    seed.choice(stack_id, redis_id)
    user_id = seed.user("demis")
    seed.favorite_stack(user_id, stack_id)
    seed.favorite_technology(user_id, redis_id)
    return SqlContentRepository(connection_factory)


def test_home_page_lists_latest_stacks(content_repository, content_cache) -> None:
    page = GetHomePageUseCase(content_repository, content_cache).execute()

    assert [stack["slug"] for stack in page["stacks"]] == ["techstacks"]
    assert isinstance(page["stacks"][0]["last_modified"], str)


def test_stack_page_is_cached(content_repository, content_cache) -> None:
    use_case = GetStackPageUseCase(content_repository, content_cache)

    page = use_case.execute("techstacks")

    assert page["stack"]["name"] == "TechStacks"
    assert [tech["tier"] for tech in page["technologies"]] == ["Data"]
    assert content_cache.get("stack:techstacks") == page


def test_technology_page(content_repository, content_cache) -> None:
    page = GetTechnologyPageUseCase(content_repository, content_cache).execute("redis")

    assert page["technology"]["name"] == "Redis"
    assert [stack["slug"] for stack in page["stacks"]] == ["techstacks"]


def test_user_page_includes_favorites(
    content_repository, content_cache, connection_factory
) -> None:
    use_case = GetUserPageUseCase(
        content_repository, SqlUserAuthRepository(connection_factory), content_cache
    )

    page = use_case.execute("demis")

    assert page["user"]["user_name"] == "demis"
    assert [stack["slug"] for stack in page["favorite_stacks"]] == ["techstacks"]
    assert [tech["slug"] for tech in page["favorite_technologies"]] == ["redis"]


def test_missing_content_raises_not_found(
    content_repository, content_cache, connection_factory
) -> None:
    with pytest.raises(EntityNotFoundError):
        GetStackPageUseCase(content_repository, content_cache).execute("missing")
    with pytest.raises(EntityNotFoundError):
        GetTechnologyPageUseCase(content_repository, content_cache).execute("missing")
    with pytest.raises(EntityNotFoundError):
        GetUserPageUseCase(
            content_repository, SqlUserAuthRepository(connection_factory), content_cache
        ).execute("missing")
