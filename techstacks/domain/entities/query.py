"""
Domain Entities - Query by convention

A ``QueryDefinition`` declares which table a read endpoint exposes and which
columns callers may filter and sort on. ``QueryRequest`` is the parsed
request for one such endpoint.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class QueryDefinition:
    name: str
    table: str
    filter_fields: Tuple[str, ...] = ()
    sortable_fields: Tuple[str, ...] = ("id", "name", "created", "last_modified")
    default_order: str = "-last_modified"
    name_field: Optional[str] = "name"


@dataclass
class QueryRequest:
    """Read request against a ``QueryDefinition``."""

    definition: QueryDefinition
    skip: Optional[int] = None
    take: Optional[int] = None
    order_by: Optional[str] = None
    name: Optional[str] = None
    filters: Dict[str, str] = field(default_factory=dict)

    @property
    def order_field(self) -> str:
        return (self.order_by or self.definition.default_order).lstrip("-")

    @property
    def order_descending(self) -> bool:
        return (self.order_by or self.definition.default_order).startswith("-")


@dataclass
class QueryResult:
    offset: int
    total: int
    rows: List[Dict[str, Any]] = field(default_factory=list)
