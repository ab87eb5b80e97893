"""
Query Router - Presentation Layer

Query-by-convention endpoints: ``GET /api/query/{name}`` with paging,
ordering, a ``name`` filter and equality filters on declared fields.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from techstacks.application.dtos.query_dto import QueryResponseDTO
from techstacks.application.use_cases.query_use_cases import AutoQueryUseCase
from techstacks.domain.entities.errors import (
    EntityNotFoundError,
    RequestValidationError,
)
from techstacks.domain.entities.query import QueryRequest
from techstacks.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/query", tags=["Query"])

RESERVED_PARAMS = {"skip", "take", "order_by", "name"}


@router.get("/{name}", response_model=QueryResponseDTO)
@inject
async def query(
    name: str,
    request: Request,
    skip: Optional[int] = Query(None, description="Number of rows to skip"),
    take: Optional[int] = Query(
        None, description="Number of rows to return (capped by the host)"
    ),
    order_by: Optional[str] = Query(
        None, description="Field to order by, prefix with '-' for descending"
    ),
    name_filter: Optional[str] = Query(
        None, alias="name", description="Substring match on the name column"
    ),
    auto_query_use_case: AutoQueryUseCase = Depends(Provide["auto_query_use_case"]),
) -> QueryResponseDTO:
    """
    Run a declared query.

    Any query parameter other than the paging and ordering ones is treated
    as an equality filter and must name a declared field.
    """
    try:
        definition = auto_query_use_case.get_definition(name)
        query_request = QueryRequest(
            definition=definition,
            skip=skip,
            take=take,
            order_by=order_by,
            name=name_filter,
            filters={
                key: value
                for key, value in request.query_params.items()
                if key not in RESERVED_PARAMS
            },
        )
        return auto_query_use_case.execute(query_request)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RequestValidationError as e:
        logger.info("query.validation.failed", query=name, errors=e.errors)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": e.message, **e.details},
        )
    except Exception as e:
        logger.error("query.failure", query=name, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
