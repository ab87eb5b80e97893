"""
SQL Content Repository - Infrastructure Layer

Read-only access to stacks, technologies and favorites.
"""

from typing import Any, List, Optional

from sqlalchemy import select

from techstacks.domain.entities.technology import (
    Technology,
    TechnologyStack,
    TechnologyTier,
)
from techstacks.domain.ports.connection_factory import IDbConnectionFactory
from techstacks.domain.repositories.content_repository import IContentRepository
from techstacks.infrastructure.database.schema import (
    technology,
    technology_choice,
    technology_stack,
    user_favorite_technology,
    user_favorite_technology_stack,
)

from ._helpers import row_to_dict, scoped_connection


def _to_stack(row: Any) -> TechnologyStack:
    return TechnologyStack(**row_to_dict(row))


def _to_technology(row: Any) -> Technology:
    values = row_to_dict(row)
    tier = values.get("tier")
    values["tier"] = TechnologyTier(tier) if tier else None
    return Technology(**values)


class SqlContentRepository(IContentRepository):
    """SQLAlchemy implementation of the content repository."""

    def __init__(self, connection_factory: IDbConnectionFactory):
        self.connection_factory = connection_factory

    def list_stacks_by_modified_desc(self, conn: Any = None) -> List[TechnologyStack]:
        stmt = select(technology_stack).order_by(
            technology_stack.c.last_modified.desc(), technology_stack.c.id.desc()
        )
        with scoped_connection(self.connection_factory, conn) as c:
            return [_to_stack(row) for row in c.execute(stmt)]

    def list_technologies_by_modified_desc(
        self, conn: Any = None
    ) -> List[Technology]:
        stmt = select(technology).order_by(
            technology.c.last_modified.desc(), technology.c.id.desc()
        )
        with scoped_connection(self.connection_factory, conn) as c:
            return [_to_technology(row) for row in c.execute(stmt)]

    def latest_stacks(self, limit: int = 20) -> List[TechnologyStack]:
        stmt = (
            select(technology_stack)
            .order_by(technology_stack.c.last_modified.desc())
            .limit(limit)
        )
        with self.connection_factory.open_connection() as conn:
            return [_to_stack(row) for row in conn.execute(stmt)]

    def get_stack_by_slug(self, slug: str) -> Optional[TechnologyStack]:
        stmt = select(technology_stack).where(technology_stack.c.slug == slug)
        with self.connection_factory.open_connection() as conn:
            row = conn.execute(stmt).first()
        return _to_stack(row) if row is not None else None

    def get_technology_by_slug(self, slug: str) -> Optional[Technology]:
        stmt = select(technology).where(technology.c.slug == slug)
        with self.connection_factory.open_connection() as conn:
            row = conn.execute(stmt).first()
        return _to_technology(row) if row is not None else None

    def get_technologies_for_stack(self, stack_id: int) -> List[Technology]:
        stmt = (
            select(technology)
            .join(technology_choice, technology_choice.c.technology_id == technology.c.id)
            .where(technology_choice.c.technology_stack_id == stack_id)
            .order_by(technology.c.tier, technology.c.name)
        )
        with self.connection_factory.open_connection() as conn:
            return [_to_technology(row) for row in conn.execute(stmt)]

    def get_stacks_using_technology(self, technology_id: int) -> List[TechnologyStack]:
        stmt = (
            select(technology_stack)
            .join(
                technology_choice,
                technology_choice.c.technology_stack_id == technology_stack.c.id,
            )
            .where(technology_choice.c.technology_id == technology_id)
            .order_by(technology_stack.c.last_modified.desc())
        )
        with self.connection_factory.open_connection() as conn:
            return [_to_stack(row) for row in conn.execute(stmt)]

    def get_favorite_stacks(self, user_id: str) -> List[TechnologyStack]:
        stmt = (
            select(technology_stack)
            .join(
                user_favorite_technology_stack,
                user_favorite_technology_stack.c.technology_stack_id
                == technology_stack.c.id,
            )
            .where(user_favorite_technology_stack.c.user_id == user_id)
            .order_by(technology_stack.c.name)
        )
        with self.connection_factory.open_connection() as conn:
            return [_to_stack(row) for row in conn.execute(stmt)]

    def get_favorite_technologies(self, user_id: str) -> List[Technology]:
        stmt = (
            select(technology)
            .join(
                user_favorite_technology,
                user_favorite_technology.c.technology_id == technology.c.id,
            )
            .where(user_favorite_technology.c.user_id == user_id)
            .order_by(technology.c.name)
        )
        with self.connection_factory.open_connection() as conn:
            return [_to_technology(row) for row in conn.execute(stmt)]
