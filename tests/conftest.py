from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Iterator, Optional

import pytest
from sqlalchemy import insert

from techstacks.infrastructure.database import (
    AUTH_TABLES,
    DOMAIN_TABLES,
    ConnectionFactory,
    Dialect,
    ensure_tables,
)
from techstacks.infrastructure.database.schema import (
    custom_user_auth,
    technology,
    technology_choice,
    technology_stack,
    user_favorite_technology,
    user_favorite_technology_stack,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

BASE_TIME = datetime(2015, 1, 1, tzinfo=timezone.utc)

APP_SETTING_ENV_KEYS = (
    "ORMLITE_PROVIDER",
    "ORMLITE_CONNECTIONSTRING",
    "WEBHOSTURL",
    "WEBSTACKS_CONSUMERKEY",
    "WEBSTACKS_CONSUMERSECRET",
    "WEBSTACKS_ACCESSTOKEN",
    "WEBSTACKS_ACCESSSECRET",
)


@pytest.fixture()
def connection_factory(tmp_path) -> Iterator[ConnectionFactory]:
    factory = ConnectionFactory(
        Dialect.SQLITE, f"sqlite+pysqlite:///{tmp_path / 'test.sqlite'}"
    )
    yield factory
    factory.dispose()


@dataclass
class Seeder:
    """Inserts content rows directly through SQLAlchemy Core."""

    connection_factory: ConnectionFactory

    def _insert(self, table: Any, **values: Any) -> int:
        with self.connection_factory.open_connection() as conn:
            result = conn.execute(insert(table).values(**values))
        return result.inserted_primary_key[0]

    def stack(
        self,
        slug: str,
        last_modified: Optional[datetime] = None,
        name: Optional[str] = None,
        **values: Any,
    ) -> int:
        last_modified = last_modified or BASE_TIME
        return self._insert(
            technology_stack,
            name=name or slug.title(),
            slug=slug,
            created=BASE_TIME,
            last_modified=last_modified,
            **values,
        )

    def technology(
        self,
        slug: str,
        last_modified: Optional[datetime] = None,
        name: Optional[str] = None,
        tier: str = "Server",
        **values: Any,
    ) -> int:
        last_modified = last_modified or BASE_TIME
        return self._insert(
            technology,
            name=name or slug.title(),
            slug=slug,
            tier=tier,
            created=BASE_TIME,
            last_modified=last_modified,
            **values,
        )

    def choice(self, stack_id: int, technology_id: int) -> int:
        return self._insert(
            technology_choice,
            technology_stack_id=stack_id,
            technology_id=technology_id,
            created=BASE_TIME,
            last_modified=BASE_TIME,
        )

    def user(self, user_name: str, modified_date: Optional[datetime] = None) -> int:
        return self._insert(
            custom_user_auth,
            user_name=user_name,
            display_name=user_name.title(),
            created_date=BASE_TIME,
            modified_date=modified_date or BASE_TIME,
        )

    def favorite_stack(self, user_id: int, stack_id: int) -> int:
        return self._insert(
            user_favorite_technology_stack,
            user_id=str(user_id),
            technology_stack_id=stack_id,
            last_modified=BASE_TIME,
        )

    def favorite_technology(self, user_id: int, technology_id: int) -> int:
        return self._insert(
            user_favorite_technology,
            user_id=str(user_id),
            technology_id=technology_id,
            last_modified=BASE_TIME,
        )


@pytest.fixture()
def seed(connection_factory: ConnectionFactory) -> Seeder:
    with connection_factory.open_connection() as conn:
        ensure_tables(conn, DOMAIN_TABLES + AUTH_TABLES)
    return Seeder(connection_factory)


@pytest.fixture()
def content_root(tmp_path, monkeypatch) -> Path:
    """Empty content root with no app setting overrides in the environment."""
    for key in APP_SETTING_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    root = tmp_path / "site"
    root.mkdir()
    return root
