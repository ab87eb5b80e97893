from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from techstacks.domain.entities import QueryRequest
from techstacks.domain.entities.errors import (
    EntityNotFoundError,
    RequestValidationError,
)
from techstacks.domain.entities.query import QueryDefinition
from techstacks.infrastructure.repositories import SqlQueryRepository

BASE_TIME = datetime(2015, 1, 1, tzinfo=timezone.utc)

TECHNOLOGIES = QueryDefinition(
    name="technologies",
    table="technology",
    filter_fields=("tier", "is_locked"),
    sortable_fields=("id", "name", "last_modified"),
)
CHOICES = QueryDefinition(
    name="technology-choices",
    table="technology_choice",
    filter_fields=("technology_stack_id",),
    sortable_fields=("id", "last_modified"),
    name_field=None,
)


@pytest.fixture()
def repository(seed, connection_factory) -> SqlQueryRepository:
    seed.technology("redis", BASE_TIME + timedelta(days=1), name="Redis", tier="Data")
    seed.technology(
        "postgresql", BASE_TIME + timedelta(days=2), name="PostgreSQL", tier="Data"
    )
    seed.technology(
        "servicestack",
        BASE_TIME + timedelta(days=3),
        name="ServiceStack",
        tier="Server",
        is_locked=True,
    )
    return SqlQueryRepository(connection_factory)


def test_default_order_is_most_recent_first(repository) -> None:
    result = repository.query(QueryRequest(definition=TECHNOLOGIES), limit=10)

    assert result.total == 3
    assert result.offset == 0
    assert [row["slug"] for row in result.rows] == [
        "servicestack",
        "postgresql",
        "redis",
    ]


def test_equality_filters_and_name_substring(repository) -> None:
    result = repository.query(
        QueryRequest(definition=TECHNOLOGIES, filters={"tier": "Data"}, name="gres"),
        limit=10,
    )

    assert result.total == 1
    assert result.rows[0]["slug"] == "postgresql"


def test_boolean_filter_is_coerced(repository) -> None:
    result = repository.query(
        QueryRequest(definition=TECHNOLOGIES, filters={"is_locked": "true"}),
        limit=10,
    )

    assert [row["slug"] for row in result.rows] == ["servicestack"]


def test_undeclared_filters_are_ignored(repository) -> None:
    result = repository.query(
        QueryRequest(definition=TECHNOLOGIES, filters={"slug": "redis"}), limit=10
    )

    assert result.total == 3


def test_order_skip_and_limit(repository) -> None:
    result = repository.query(
        QueryRequest(definition=TECHNOLOGIES, order_by="name", skip=1), limit=1
    )

    assert result.total == 3
    assert result.offset == 1
    assert [row["name"] for row in result.rows] == ["Redis"]


def test_integer_filter_rejects_non_numbers(repository) -> None:
    with pytest.raises(RequestValidationError):
        repository.query(
            QueryRequest(definition=CHOICES, filters={"technology_stack_id": "x"}),
            limit=10,
        )


def test_unknown_table(repository) -> None:
    definition = QueryDefinition(name="missing", table="missing")

    with pytest.raises(EntityNotFoundError):
        repository.query(QueryRequest(definition=definition), limit=10)


def test_boolean_filter_accepts_false_spellings(repository) -> None:
    result = repository.query(
        QueryRequest(definition=TECHNOLOGIES, filters={"is_locked": "Off"}),
        limit=10,
    )

    assert sorted(row["slug"] for row in result.rows) == ["postgresql", "redis"]


def test_boolean_filter_rejects_unknown_values(repository) -> None:
    with pytest.raises(RequestValidationError) as exc_info:
        repository.query(
            QueryRequest(definition=TECHNOLOGIES, filters={"is_locked": "maybe"}),
            limit=10,
        )

    assert exc_info.value.errors == ["Filter 'is_locked' must be true or false."]
