"""
SQL User Auth Repository - Infrastructure Layer

Stores users that signed in through Twitter or GitHub, together with the
tokens each provider issued.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import insert, select, update

from techstacks.domain.entities.user import AuthTokens, UserAuth, UserAuthDetails
from techstacks.domain.ports.connection_factory import IDbConnectionFactory
from techstacks.domain.repositories.user_auth_repository import IUserAuthRepository
from techstacks.infrastructure.database.schema import (
    AUTH_TABLES,
    custom_user_auth,
    ensure_tables,
    user_auth_details,
)
from techstacks.shared import get_logger

from ._helpers import row_to_dict, scoped_connection

logger = get_logger(__name__)


class SqlUserAuthRepository(IUserAuthRepository):
    """SQLAlchemy implementation of the user auth repository."""

    def __init__(self, connection_factory: IDbConnectionFactory):
        """
        Initialize the user auth repository.

        Args:
            connection_factory: Factory leasing connections to the database
        """
        self.connection_factory = connection_factory

    def init_schema(self) -> None:
        with self.connection_factory.open_connection() as conn:
            created = ensure_tables(conn, AUTH_TABLES)
        logger.info("auth.schema.ensured", created=created)

    def get_user_auth(self, user_auth_id: int) -> Optional[UserAuth]:
        stmt = select(custom_user_auth).where(custom_user_auth.c.id == user_auth_id)
        with self.connection_factory.open_connection() as conn:
            row = conn.execute(stmt).first()
        return UserAuth(**row_to_dict(row)) if row is not None else None

    def get_user_auth_by_user_name(self, user_name: str) -> Optional[UserAuth]:
        stmt = select(custom_user_auth).where(custom_user_auth.c.user_name == user_name)
        with self.connection_factory.open_connection() as conn:
            row = conn.execute(stmt).first()
        return UserAuth(**row_to_dict(row)) if row is not None else None

    def get_user_auth_details(self, user_auth_id: int) -> List[UserAuthDetails]:
        stmt = (
            select(user_auth_details)
            .where(user_auth_details.c.user_auth_id == user_auth_id)
            .order_by(user_auth_details.c.provider)
        )
        with self.connection_factory.open_connection() as conn:
            return [UserAuthDetails(**row_to_dict(row)) for row in conn.execute(stmt)]

    def find_users_by_modified_desc(self, conn: Any = None) -> List[UserAuth]:
        stmt = select(custom_user_auth).order_by(
            custom_user_auth.c.modified_date.desc(), custom_user_auth.c.id.desc()
        )
        with scoped_connection(self.connection_factory, conn) as c:
            return [UserAuth(**row_to_dict(row)) for row in c.execute(stmt)]

    def create_or_merge_auth_session(self, tokens: AuthTokens) -> UserAuth:
        now = datetime.now(timezone.utc)
        profile = {
            "display_name": tokens.display_name,
            "email": tokens.email,
            "default_profile_url": tokens.profile_url,
        }

        with self.connection_factory.open_connection() as conn:
            details = conn.execute(
                select(user_auth_details.c.id, user_auth_details.c.user_auth_id).where(
                    user_auth_details.c.provider == tokens.provider,
                    user_auth_details.c.user_id == tokens.user_id,
                )
            ).first()

            if details is not None:
                user_auth_id = details.user_auth_id
                conn.execute(
                    update(custom_user_auth)
                    .where(custom_user_auth.c.id == user_auth_id)
                    .values(modified_date=now, **_non_empty(profile))
                )
            else:
                user_auth_id = self._insert_user(conn, tokens, profile, now)

            token_values = {
                "user_name": tokens.user_name,
                "display_name": tokens.display_name,
                "email": tokens.email,
                "profile_url": tokens.profile_url,
                "access_token": tokens.access_token,
                "access_token_secret": tokens.access_token_secret,
                "modified_date": now,
            }
            if details is not None:
                conn.execute(
                    update(user_auth_details)
                    .where(user_auth_details.c.id == details.id)
                    .values(**token_values)
                )
            else:
                conn.execute(
                    insert(user_auth_details).values(
                        user_auth_id=user_auth_id,
                        provider=tokens.provider,
                        user_id=tokens.user_id,
                        created_date=now,
                        **token_values,
                    )
                )

            row = conn.execute(
                select(custom_user_auth).where(custom_user_auth.c.id == user_auth_id)
            ).one()

        logger.info(
            "auth.user.merged",
            provider=tokens.provider,
            user_auth_id=user_auth_id,
            created=details is None,
        )
        return UserAuth(**row_to_dict(row))

    def _insert_user(
        self, conn: Any, tokens: AuthTokens, profile: dict, now: datetime
    ) -> int:
        user_name = self._unique_user_name(conn, tokens.user_name)
        result = conn.execute(
            insert(custom_user_auth).values(
                user_name=user_name,
                created_date=now,
                modified_date=now,
                **profile,
            )
        )
        return result.inserted_primary_key[0]

    @staticmethod
    def _unique_user_name(conn: Any, user_name: str) -> str:
        """The same handle on two providers gets a numeric suffix."""
        candidate = user_name
        suffix = 1
        while conn.execute(
            select(custom_user_auth.c.id).where(
                custom_user_auth.c.user_name == candidate
            )
        ).first():
            suffix += 1
            candidate = f"{user_name}{suffix}"
        return candidate


def _non_empty(values: dict) -> dict:
    return {key: value for key, value in values.items() if value}
