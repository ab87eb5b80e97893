"""
Query DTOs - Application Layer

Response envelope of the query-by-convention endpoints.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class QueryResponseDTO(BaseModel):
    """One page of query results."""

    offset: int = Field(..., description="Number of rows skipped", ge=0)
    total: int = Field(..., description="Number of rows matching the filters", ge=0)
    results: List[Dict[str, Any]] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "offset": 0,
                "total": 1,
                "results": [
                    {
                        "id": 1,
                        "name": "ServiceStack",
                        "slug": "servicestack",
                        "tier": "Server",
                        "last_modified": "2015-01-21T12:00:00Z",
                    }
                ],
            }
        }
    }
