"""Validators for query-by-convention requests."""

from typing import List

from techstacks.domain.entities.query import QueryRequest
from techstacks.domain.services.validation import ValidatorEntry

MAX_NAME_FILTER_LENGTH = 100


def validate_paging(request: QueryRequest, errors: List[str]) -> None:
    if request.skip is not None and request.skip < 0:
        errors.append("Skip must be greater than or equal to 0.")
    if request.take is not None and request.take < 0:
        errors.append("Take must be greater than or equal to 0.")


def validate_order_by(request: QueryRequest, errors: List[str]) -> None:
    if request.order_field not in request.definition.sortable_fields:
        errors.append(
            f"Cannot order {request.definition.name} by '{request.order_field}'."
        )


def validate_name_filter(request: QueryRequest, errors: List[str]) -> None:
    if request.name is None:
        return
    if request.definition.name_field is None:
        errors.append(f"{request.definition.name} cannot be filtered by name.")
    elif len(request.name) > MAX_NAME_FILTER_LENGTH:
        errors.append(
            f"Name filter must be at most {MAX_NAME_FILTER_LENGTH} characters."
        )


def validate_filters(request: QueryRequest, errors: List[str]) -> None:
    for field in sorted(request.filters):
        if field not in request.definition.filter_fields:
            errors.append(f"Unknown filter '{field}' for {request.definition.name}.")


VALIDATORS: List[ValidatorEntry] = [
    (QueryRequest, validate_paging),
    (QueryRequest, validate_order_by),
    (QueryRequest, validate_name_filter),
    (QueryRequest, validate_filters),
]
