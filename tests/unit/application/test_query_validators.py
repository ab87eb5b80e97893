from __future__ import annotations

from techstacks.application.use_cases.query_use_cases import QUERY_DEFINITIONS
from techstacks.application.validators import (
    MAX_NAME_FILTER_LENGTH,
    VALIDATORS,
    validate_filters,
    validate_name_filter,
    validate_order_by,
    validate_paging,
)
from techstacks.domain.entities import QueryRequest

TECHNOLOGIES = QUERY_DEFINITIONS["technologies"]
CHOICES = QUERY_DEFINITIONS["technology-choices"]


def _errors(validator, request) -> list:
    errors: list = []
    validator(request, errors)
    return errors


def test_every_validator_is_registered_for_query_requests() -> None:
    assert {request_type for request_type, _ in VALIDATORS} == {QueryRequest}
    assert len(VALIDATORS) == 4


def test_validate_paging() -> None:
    assert _errors(validate_paging, QueryRequest(TECHNOLOGIES, skip=0, take=5)) == []
    assert len(_errors(validate_paging, QueryRequest(TECHNOLOGIES, skip=-1, take=-1))) == 2


def test_validate_order_by() -> None:
    assert _errors(validate_order_by, QueryRequest(TECHNOLOGIES, order_by="-tier")) == []
    assert _errors(validate_order_by, QueryRequest(TECHNOLOGIES, order_by="password"))


def test_validate_name_filter() -> None:
    long_name = "x" * (MAX_NAME_FILTER_LENGTH + 1)

    assert _errors(validate_name_filter, QueryRequest(TECHNOLOGIES, name="redis")) == []
    assert _errors(validate_name_filter, QueryRequest(TECHNOLOGIES, name=long_name))
    assert _errors(validate_name_filter, QueryRequest(CHOICES, name="redis"))


def test_validate_filters() -> None:
    request = QueryRequest(TECHNOLOGIES, filters={"tier": "Data", "secret": "1"})

    assert _errors(validate_filters, request) == [
        "Unknown filter 'secret' for technologies."
    ]
