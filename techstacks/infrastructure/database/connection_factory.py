"""
Connection Factory - Infrastructure Layer

Two dialects are supported: an embedded SQLite file and a PostgreSQL
server. The provider setting only selects PostgreSQL when it is exactly
``Postgres``; every other value falls back to the SQLite file.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

from techstacks.domain.entities.errors import ConfigurationError
from techstacks.shared import get_logger

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = get_logger(__name__)

POSTGRES_PROVIDER = "Postgres"
SQLITE_PROVIDER = "Sqlite"
POSTGRES_DRIVER = "postgresql+psycopg"
SQLITE_DRIVER = "sqlite+pysqlite"

# Keys of the "Server=...;Database=..." connection string form.
_CONNECTION_STRING_KEYS: Dict[str, str] = {
    "server": "host",
    "host": "host",
    "port": "port",
    "user id": "username",
    "userid": "username",
    "user": "username",
    "username": "username",
    "password": "password",
    "database": "database",
}


class Dialect(str, Enum):
    SQLITE = "sqlite"
    POSTGRES = "postgres"


@dataclass(frozen=True)
class DatabaseConfig:
    dialect: Dialect
    connection_string: str


def to_postgres_url(connection_string: str) -> str:
    """
    Normalise a PostgreSQL connection string to a SQLAlchemy URL.

    Accepts URLs (``postgresql://user:pw@host/db``) and the key/value form
    ``Server=host;Port=5432;User Id=user;Password=pw;Database=db``.
    """
    if "://" in connection_string:
        url = make_url(connection_string)
        if url.drivername in ("postgres", "postgresql"):
            url = url.set(drivername=POSTGRES_DRIVER)
        return url.render_as_string(hide_password=False)

    parts: Dict[str, str] = {}
    for pair in connection_string.split(";"):
        if not pair.strip():
            continue
        key, sep, value = pair.partition("=")
        target = _CONNECTION_STRING_KEYS.get(key.strip().lower())
        if not sep or target is None:
            continue
        parts[target] = value.strip()

    if "host" not in parts:
        raise ConfigurationError(
            "PostgreSQL connection string must name a server",
            details={"keys": sorted(parts)},
        )
    url = URL.create(
        POSTGRES_DRIVER,
        username=parts.get("username"),
        password=parts.get("password"),
        host=parts["host"],
        port=int(parts["port"]) if parts.get("port") else None,
        database=parts.get("database"),
    )
    return url.render_as_string(hide_password=False)


def select_database(
    provider: Optional[str],
    connection_string: Optional[str],
    sqlite_path: Union[str, Path],
) -> DatabaseConfig:
    """
    Choose the dialect and connection string from the provider setting.

    Args:
        provider: Value of ``OrmLite.Provider``
        connection_string: Value of ``OrmLite.ConnectionString``
        sqlite_path: Fixed database file used for the embedded dialect

    Returns:
        The selected database configuration

    Raises:
        ConfigurationError: If PostgreSQL is selected without a connection string
    """
    if provider == POSTGRES_PROVIDER:
        if not connection_string:
            raise ConfigurationError(
                "OrmLite.ConnectionString is required when OrmLite.Provider is Postgres"
            )
        return DatabaseConfig(Dialect.POSTGRES, to_postgres_url(connection_string))

    if provider not in (None, "", SQLITE_PROVIDER):
        logger.warning(
            "database.provider.unrecognized",
            provider=provider,
            fallback=Dialect.SQLITE.value,
        )
    url = URL.create(SQLITE_DRIVER, database=str(Path(sqlite_path)))
    return DatabaseConfig(Dialect.SQLITE, url.render_as_string())


class ConnectionFactory:
    """Owns the engine for the process and leases scoped connections."""

    def __init__(
        self, dialect: Union[Dialect, str], connection_string: str, echo: bool = False
    ):
        self.dialect = Dialect(dialect)
        self.connection_string = connection_string
        self.echo = echo
        self._engine: Optional[Engine] = None

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "ConnectionFactory":
        return cls(config.dialect, config.connection_string)

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        url = make_url(self.connection_string)
        if self.dialect is Dialect.SQLITE and url.database not in (None, "", ":memory:"):
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(url, echo=self.echo, future=True)

        if self.dialect is Dialect.SQLITE:

            @event.listens_for(engine, "connect")
            def _sqlite_pragmas(dbapi_conn, conn_record):  # type: ignore[no-untyped-def]
                cursor = dbapi_conn.cursor()
                cursor.execute("PRAGMA foreign_keys=ON;")
                cursor.close()

        logger.info(
            "database.engine.created",
            dialect=self.dialect.value,
            url=url.render_as_string(hide_password=True),
        )
        return engine

    @contextmanager
    def open_connection(self) -> Iterator[Connection]:
        """
        Lease a transactional connection.

        The transaction commits when the block succeeds, rolls back when it
        raises, and the connection returns to the pool either way.
        """
        with self.engine.begin() as conn:
            yield conn

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.info("database.engine.disposed", dialect=self.dialect.value)
