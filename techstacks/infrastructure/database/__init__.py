"""
Database package - Infrastructure Layer

Connection factory, dialect selection and the relational schema.
"""

from techstacks.infrastructure.database.connection_factory import (
    ConnectionFactory,
    DatabaseConfig,
    Dialect,
    select_database,
    to_postgres_url,
)
from techstacks.infrastructure.database.schema import (
    AUTH_TABLES,
    CACHE_TABLES,
    DOMAIN_TABLES,
    ensure_tables,
    metadata,
)

__all__ = [
    "AUTH_TABLES",
    "CACHE_TABLES",
    "ConnectionFactory",
    "DOMAIN_TABLES",
    "DatabaseConfig",
    "Dialect",
    "ensure_tables",
    "metadata",
    "select_database",
    "to_postgres_url",
]
