"""
SQL Cache Client - Infrastructure Layer

Persistent cache stored in the ``cache_entry`` table of the relational
database, so entries (sessions, pending OAuth requests) survive restarts.
"""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from sqlalchemy import delete, insert, select, update

from techstacks.domain.ports.cache_client import ICacheClient
from techstacks.domain.ports.connection_factory import IDbConnectionFactory
from techstacks.infrastructure.database.schema import (
    CACHE_TABLES,
    cache_entry,
    ensure_tables,
)
from techstacks.shared import as_utc, get_logger

logger = get_logger(__name__)


class SqlCacheClient(ICacheClient):
    """Relational store implementation of the cache client."""

    def __init__(self, connection_factory: IDbConnectionFactory):
        """
        Initialize the SQL cache client.

        Args:
            connection_factory: Factory leasing connections to the database
        """
        self.connection_factory = connection_factory

    def init_schema(self) -> None:
        """
        Create the ``cache_entry`` table if it does not exist.

        Entries that expired while the host was down are purged here, since
        keys such as pending OAuth states are never read again once abandoned.
        """
        with self.connection_factory.open_connection() as conn:
            created = ensure_tables(conn, CACHE_TABLES)
        removed = self.remove_expired()
        logger.info("cache.schema.ensured", created=created, expired_removed=removed)

    def get(self, key: str) -> Optional[Any]:
        with self.connection_factory.open_connection() as conn:
            row = conn.execute(
                select(cache_entry.c.data, cache_entry.c.expiry_date).where(
                    cache_entry.c.id == key
                )
            ).first()
            if row is None:
                return None
            if row.expiry_date is not None and as_utc(row.expiry_date) <= datetime.now(
                timezone.utc
            ):
                conn.execute(delete(cache_entry).where(cache_entry.c.id == key))
                return None
        return json.loads(row.data)

    def set(
        self, key: str, value: Any, expires_in: Optional[timedelta] = None
    ) -> None:
        now = datetime.now(timezone.utc)
        values = {
            "data": json.dumps(value),
            "expiry_date": now + expires_in if expires_in is not None else None,
            "modified_date": now,
        }
        with self.connection_factory.open_connection() as conn:
            result = conn.execute(
                update(cache_entry).where(cache_entry.c.id == key).values(**values)
            )
            if result.rowcount == 0:
                conn.execute(
                    insert(cache_entry).values(id=key, created_date=now, **values)
                )

    def delete(self, key: str) -> bool:
        with self.connection_factory.open_connection() as conn:
            result = conn.execute(delete(cache_entry).where(cache_entry.c.id == key))
        return result.rowcount > 0

    def clear(self) -> None:
        with self.connection_factory.open_connection() as conn:
            conn.execute(delete(cache_entry))

    def remove_by_prefix(self, prefix: str) -> int:
        with self.connection_factory.open_connection() as conn:
            result = conn.execute(
                delete(cache_entry).where(
                    cache_entry.c.id.startswith(prefix, autoescape=True)
                )
            )
        return result.rowcount

    def remove_expired(self) -> int:
        """Delete every expired entry and return how many were removed."""
        now = datetime.now(timezone.utc)
        with self.connection_factory.open_connection() as conn:
            result = conn.execute(
                delete(cache_entry).where(
                    cache_entry.c.expiry_date.is_not(None),
                    cache_entry.c.expiry_date <= now,
                )
            )
        return result.rowcount
