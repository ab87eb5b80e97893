from __future__ import annotations

from typing import List

import pytest

from techstacks.application.use_cases.query_use_cases import (
    QUERY_DEFINITIONS,
    AutoQueryUseCase,
)
from techstacks.application.validators import VALIDATORS
from techstacks.domain.entities import QueryRequest, QueryResult
from techstacks.domain.entities.errors import (
    EntityNotFoundError,
    RequestValidationError,
)
from techstacks.domain.services.validation import ValidatorRegistry
from techstacks.infrastructure.repositories import SqlQueryRepository


class _RecordingRepository:
    def __init__(self) -> None:
        self.limits: List[int] = []

    def query(self, request: QueryRequest, limit: int) -> QueryResult:
        self.limits.append(limit)
        return QueryResult(offset=request.skip or 0, total=0, rows=[])


def _registry() -> ValidatorRegistry:
    registry = ValidatorRegistry()
    registry.register_all(VALIDATORS)
    return registry


@pytest.mark.parametrize(
    ("take", "expected"), [(None, 200), (10, 10), (200, 200), (5000, 200)]
)
def test_take_is_clamped_to_max_limit(take, expected) -> None:
    repository = _RecordingRepository()
    use_case = AutoQueryUseCase(repository, _registry())

    use_case.execute(QueryRequest(QUERY_DEFINITIONS["techstacks"], take=take))

    assert repository.limits == [expected]


def test_invalid_request_never_reaches_repository() -> None:
    repository = _RecordingRepository()
    use_case = AutoQueryUseCase(repository, _registry())

    with pytest.raises(RequestValidationError):
        use_case.execute(QueryRequest(QUERY_DEFINITIONS["techstacks"], skip=-1))

    assert repository.limits == []


def test_get_definition() -> None:
    use_case = AutoQueryUseCase(_RecordingRepository(), _registry())

    assert use_case.get_definition("technologies").table == "technology"
    with pytest.raises(EntityNotFoundError):
        use_case.get_definition("secrets")


def test_never_returns_more_than_max_limit_rows(seed, connection_factory) -> None:
    for number in range(205):
        seed.stack(f"stack-{number:03d}")
    use_case = AutoQueryUseCase(SqlQueryRepository(connection_factory), _registry())

    response = use_case.execute(
        QueryRequest(QUERY_DEFINITIONS["techstacks"], take=1000)
    )

    assert response.total == 205
    assert len(response.results) == 200
