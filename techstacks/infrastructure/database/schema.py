"""
Relational schema - Infrastructure Layer

SQLAlchemy Core tables for every store the web host touches:

- domain content: ``technology_stack``, ``technology``, ``technology_choice``,
  ``user_favorite_technology_stack``, ``user_favorite_technology``
- users signed in through identity providers: ``custom_user_auth``,
  ``user_auth_details``
- the persistent cache: ``cache_entry``

Tables are created on demand with ``ensure_tables``, which skips any table
that already exists so repeated starts against the same database are safe.
"""

from typing import Any, Iterable, List

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    inspect,
)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)


def _audit_columns() -> List[Column]:
    return [
        Column("owner_id", String(100)),
        Column("created_by", String(100)),
        Column("last_modified_by", String(100)),
        Column("created", DateTime(timezone=True), nullable=False),
        Column("last_modified", DateTime(timezone=True), nullable=False, index=True),
    ]


technology_stack = Table(
    "technology_stack",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(200), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column("vendor_name", String(200)),
    Column("description", Text),
    Column("app_url", String(500)),
    Column("screenshot_url", String(500)),
    Column("details", Text),
    Column("is_locked", Boolean, nullable=False, default=False),
    *_audit_columns(),
)

technology = Table(
    "technology",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(200), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column("vendor_name", String(200)),
    Column("vendor_url", String(500)),
    Column("product_url", String(500)),
    Column("logo_url", String(500)),
    Column("description", Text),
    Column("tier", String(50), index=True),
    Column("is_locked", Boolean, nullable=False, default=False),
    Column("logo_approved", Boolean, nullable=False, default=False),
    *_audit_columns(),
)

technology_choice = Table(
    "technology_choice",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("technology_id", Integer, ForeignKey("technology.id"), nullable=False),
    Column(
        "technology_stack_id",
        Integer,
        ForeignKey("technology_stack.id"),
        nullable=False,
    ),
    Column("justification", Text),
    *_audit_columns(),
)

user_favorite_technology_stack = Table(
    "user_favorite_technology_stack",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(100), nullable=False, index=True),
    Column(
        "technology_stack_id",
        Integer,
        ForeignKey("technology_stack.id"),
        nullable=False,
    ),
    Column("last_modified", DateTime(timezone=True), nullable=False),
)

user_favorite_technology = Table(
    "user_favorite_technology",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(100), nullable=False, index=True),
    Column("technology_id", Integer, ForeignKey("technology.id"), nullable=False),
    Column("last_modified", DateTime(timezone=True), nullable=False),
)

custom_user_auth = Table(
    "custom_user_auth",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_name", String(100), nullable=False, unique=True),
    Column("display_name", String(200)),
    Column("email", String(200)),
    Column("first_name", String(100)),
    Column("last_name", String(100)),
    Column("full_name", String(200)),
    Column("default_profile_url", String(500)),
    Column("created_date", DateTime(timezone=True), nullable=False),
    Column("modified_date", DateTime(timezone=True), nullable=False, index=True),
)

user_auth_details = Table(
    "user_auth_details",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_auth_id", Integer, ForeignKey("custom_user_auth.id"), nullable=False
    ),
    Column("provider", String(50), nullable=False),
    Column("user_id", String(100), nullable=False),
    Column("user_name", String(100)),
    Column("display_name", String(200)),
    Column("email", String(200)),
    Column("profile_url", String(500)),
    Column("access_token", String(500)),
    Column("access_token_secret", String(500)),
    Column("created_date", DateTime(timezone=True), nullable=False),
    Column("modified_date", DateTime(timezone=True), nullable=False),
)

cache_entry = Table(
    "cache_entry",
    metadata,
    Column("id", String(500), primary_key=True),
    Column("data", Text, nullable=False),
    Column("expiry_date", DateTime(timezone=True)),
    Column("created_date", DateTime(timezone=True), nullable=False),
    Column("modified_date", DateTime(timezone=True), nullable=False),
)

DOMAIN_TABLES = (
    technology_stack,
    technology,
    technology_choice,
    user_favorite_technology_stack,
    user_favorite_technology,
)
AUTH_TABLES = (custom_user_auth, user_auth_details)
CACHE_TABLES = (cache_entry,)

TABLES_BY_NAME = {table.name: table for table in metadata.sorted_tables}


def ensure_tables(conn: Any, tables: Iterable[Table]) -> List[str]:
    """
    Create each table that does not exist yet.

    Args:
        conn: Open SQLAlchemy connection
        tables: Tables to ensure

    Returns:
        Names of the tables that were created by this call
    """
    tables = list(tables)
    existing = set(inspect(conn).get_table_names())
    created = [table.name for table in tables if table.name not in existing]
    metadata.create_all(conn, tables=tables, checkfirst=True)
    return created
