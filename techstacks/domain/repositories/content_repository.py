"""
Content Repository Interface

Read access to technology stacks, technologies and favorites.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from techstacks.domain.entities.technology import Technology, TechnologyStack


class IContentRepository(ABC):
    """Interface for content repository implementations."""

    @abstractmethod
    def list_stacks_by_modified_desc(self, conn: Any = None) -> List[TechnologyStack]:
        pass

    @abstractmethod
    def list_technologies_by_modified_desc(
        self, conn: Any = None
    ) -> List[Technology]:
        pass

    @abstractmethod
    def latest_stacks(self, limit: int = 20) -> List[TechnologyStack]:
        pass

    @abstractmethod
    def get_stack_by_slug(self, slug: str) -> Optional[TechnologyStack]:
        pass

    @abstractmethod
    def get_technology_by_slug(self, slug: str) -> Optional[Technology]:
        pass

    @abstractmethod
    def get_technologies_for_stack(self, stack_id: int) -> List[Technology]:
        pass

    @abstractmethod
    def get_stacks_using_technology(self, technology_id: int) -> List[TechnologyStack]:
        pass

    @abstractmethod
    def get_favorite_stacks(self, user_id: str) -> List[TechnologyStack]:
        pass

    @abstractmethod
    def get_favorite_technologies(self, user_id: str) -> List[Technology]:
        pass
