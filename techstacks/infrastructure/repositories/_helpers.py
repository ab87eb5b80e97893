"""Row mapping helpers shared by the SQL repositories."""

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, Mapping

from techstacks.domain.ports.connection_factory import IDbConnectionFactory
from techstacks.shared import as_utc


def row_to_dict(row: Any) -> Dict[str, Any]:
    """Convert a result row to a dict, normalising datetimes to UTC."""
    mapping: Mapping[str, Any] = row._mapping
    return {
        key: as_utc(value) if isinstance(value, datetime) else value
        for key, value in mapping.items()
    }


@contextmanager
def scoped_connection(
    connection_factory: IDbConnectionFactory, conn: Any = None
) -> Iterator[Any]:
    """Reuse ``conn`` when the caller already holds one, else lease a new one."""
    if conn is not None:
        yield conn
        return
    with connection_factory.open_connection() as leased:
        yield leased
