"""
SQL Query Repository - Infrastructure Layer

Generic read access behind the query-by-convention endpoints: equality
filters on declared columns, a ``name`` substring filter, ordering and
paging, all translated to SQLAlchemy Core against the declared table.
"""

from typing import Any, List

from sqlalchemy import Boolean, Integer, func, select

from techstacks.domain.entities.errors import (
    EntityNotFoundError,
    RequestValidationError,
)
from techstacks.domain.entities.query import QueryRequest, QueryResult
from techstacks.domain.ports.connection_factory import IDbConnectionFactory
from techstacks.domain.repositories.query_repository import IQueryRepository
from techstacks.infrastructure.database.schema import TABLES_BY_NAME

from ._helpers import row_to_dict

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _coerce(column: Any, value: str) -> Any:
    if isinstance(column.type, Boolean):
        flag = value.strip().lower()
        if flag in _TRUE_VALUES:
            return True
        if flag in _FALSE_VALUES:
            return False
        raise RequestValidationError(
            [f"Filter '{column.name}' must be true or false."], "QueryRequest"
        )
    if isinstance(column.type, Integer):
        try:
            return int(value)
        except ValueError:
            raise RequestValidationError(
                [f"Filter '{column.name}' must be an integer."], "QueryRequest"
            ) from None
    return value


class SqlQueryRepository(IQueryRepository):
    """SQLAlchemy implementation of the query repository."""

    def __init__(self, connection_factory: IDbConnectionFactory):
        self.connection_factory = connection_factory

    def query(self, request: QueryRequest, limit: int) -> QueryResult:
        definition = request.definition
        table = TABLES_BY_NAME.get(definition.table)
        if table is None:
            raise EntityNotFoundError("Table", definition.table)

        conditions: List[Any] = [
            table.c[field] == _coerce(table.c[field], value)
            for field, value in request.filters.items()
            if field in definition.filter_fields
        ]
        if request.name and definition.name_field:
            conditions.append(
                table.c[definition.name_field].ilike(f"%{request.name}%")
            )

        order_column = table.c[request.order_field]
        order = order_column.desc() if request.order_descending else order_column.asc()
        offset = request.skip or 0

        rows_stmt = select(table)
        count_stmt = select(func.count()).select_from(table)
        if conditions:
            rows_stmt = rows_stmt.where(*conditions)
            count_stmt = count_stmt.where(*conditions)
        rows_stmt = (
            rows_stmt.order_by(order, table.c.id.asc()).offset(offset).limit(limit)
        )

        with self.connection_factory.open_connection() as conn:
            total = conn.execute(count_stmt).scalar_one()
            rows = [row_to_dict(row) for row in conn.execute(rows_stmt)]

        return QueryResult(offset=offset, total=total, rows=rows)
