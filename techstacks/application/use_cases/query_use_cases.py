"""
Query Use Cases - Application Layer

Query-by-convention: read endpoints generated from declared table
definitions instead of hand-written handlers.
"""

from typing import Dict, Iterable, Optional

from techstacks.application.dtos.query_dto import QueryResponseDTO
from techstacks.application.models.host_config import DEFAULT_QUERY_MAX_LIMIT
from techstacks.domain.entities.errors import EntityNotFoundError
from techstacks.domain.entities.query import QueryDefinition, QueryRequest
from techstacks.domain.repositories.query_repository import IQueryRepository
from techstacks.domain.services.validation import ValidatorRegistry

QUERY_DEFINITIONS: Dict[str, QueryDefinition] = {
    definition.name: definition
    for definition in (
        QueryDefinition(
            name="technologies",
            table="technology",
            filter_fields=("slug", "tier", "vendor_name", "is_locked", "logo_approved"),
            sortable_fields=("id", "name", "tier", "created", "last_modified"),
        ),
        QueryDefinition(
            name="techstacks",
            table="technology_stack",
            filter_fields=("slug", "vendor_name", "owner_id", "is_locked"),
        ),
        QueryDefinition(
            name="technology-choices",
            table="technology_choice",
            filter_fields=("technology_id", "technology_stack_id"),
            sortable_fields=("id", "created", "last_modified"),
            name_field=None,
        ),
    )
}


class AutoQueryUseCase:
    """Use case serving the query-by-convention endpoints."""

    def __init__(
        self,
        query_repository: IQueryRepository,
        validator_registry: ValidatorRegistry,
        max_limit: int = DEFAULT_QUERY_MAX_LIMIT,
        definitions: Optional[Iterable[QueryDefinition]] = None,
    ):
        self.query_repository = query_repository
        self.validator_registry = validator_registry
        self.max_limit = max_limit
        self.definitions = (
            {definition.name: definition for definition in definitions}
            if definitions is not None
            else dict(QUERY_DEFINITIONS)
        )

    def get_definition(self, name: str) -> QueryDefinition:
        definition = self.definitions.get(name)
        if definition is None:
            raise EntityNotFoundError("Query", name)
        return definition

    def execute(self, request: QueryRequest) -> QueryResponseDTO:
        """
        Validate and run a query.

        ``take`` is clamped to ``max_limit``; an absent ``take`` returns a
        full page of ``max_limit`` rows.

        Raises:
            RequestValidationError: If the request breaks a validation rule
        """
        self.validator_registry.validate(request)

        take = self.max_limit if request.take is None else min(request.take, self.max_limit)
        result = self.query_repository.query(request, take)

        return QueryResponseDTO(
            offset=result.offset, total=result.total, results=result.rows
        )
