"""
Content Use Cases - Application Layer

Page data for the server-rendered views, served through the content cache.
"""

from typing import Any, Dict

from techstacks.application.dtos.content_dto import (
    TechnologyDTO,
    TechnologyStackDTO,
    UserProfileDTO,
)
from techstacks.domain.entities.errors import EntityNotFoundError
from techstacks.domain.repositories.content_repository import IContentRepository
from techstacks.domain.repositories.user_auth_repository import IUserAuthRepository
from techstacks.infrastructure.cache.content_cache import ContentCache

HOME_PAGE_STACKS = 20


def _dump(dto_type: Any, entity: Any) -> Dict[str, Any]:
    return dto_type.model_validate(entity).model_dump(mode="json")


class GetHomePageUseCase:
    def __init__(
        self, content_repository: IContentRepository, content_cache: ContentCache
    ):
        self.content_repository = content_repository
        self.content_cache = content_cache

    def execute(self) -> Dict[str, Any]:
        return self.content_cache.get_or_create(
            "home",
            lambda: {
                "stacks": [
                    _dump(TechnologyStackDTO, stack)
                    for stack in self.content_repository.latest_stacks(HOME_PAGE_STACKS)
                ]
            },
        )


class GetStackPageUseCase:
    def __init__(
        self, content_repository: IContentRepository, content_cache: ContentCache
    ):
        self.content_repository = content_repository
        self.content_cache = content_cache

    def _load(self, slug: str) -> Any:
        stack = self.content_repository.get_stack_by_slug(slug)
        if stack is None:
            return None
        return {
            "stack": _dump(TechnologyStackDTO, stack),
            "technologies": [
                _dump(TechnologyDTO, tech)
                for tech in self.content_repository.get_technologies_for_stack(stack.id)
            ],
        }

    def execute(self, slug: str) -> Dict[str, Any]:
        """Raises EntityNotFoundError if no stack has this slug."""
        page = self.content_cache.get_or_create(f"stack:{slug}", lambda: self._load(slug))
        if page is None:
            raise EntityNotFoundError("TechnologyStack", slug)
        return page


class GetTechnologyPageUseCase:
    def __init__(
        self, content_repository: IContentRepository, content_cache: ContentCache
    ):
        self.content_repository = content_repository
        self.content_cache = content_cache

    def _load(self, slug: str) -> Any:
        technology = self.content_repository.get_technology_by_slug(slug)
        if technology is None:
            return None
        return {
            "technology": _dump(TechnologyDTO, technology),
            "stacks": [
                _dump(TechnologyStackDTO, stack)
                for stack in self.content_repository.get_stacks_using_technology(
                    technology.id
                )
            ],
        }

    def execute(self, slug: str) -> Dict[str, Any]:
        """Raises EntityNotFoundError if no technology has this slug."""
        page = self.content_cache.get_or_create(f"tech:{slug}", lambda: self._load(slug))
        if page is None:
            raise EntityNotFoundError("Technology", slug)
        return page


class GetUserPageUseCase:
    def __init__(
        self,
        content_repository: IContentRepository,
        user_auth_repository: IUserAuthRepository,
        content_cache: ContentCache,
    ):
        self.content_repository = content_repository
        self.user_auth_repository = user_auth_repository
        self.content_cache = content_cache

    def _load(self, user_name: str) -> Any:
        user = self.user_auth_repository.get_user_auth_by_user_name(user_name)
        if user is None:
            return None
        user_id = str(user.id)
        return {
            "user": _dump(UserProfileDTO, user),
            "favorite_stacks": [
                _dump(TechnologyStackDTO, stack)
                for stack in self.content_repository.get_favorite_stacks(user_id)
            ],
            "favorite_technologies": [
                _dump(TechnologyDTO, tech)
                for tech in self.content_repository.get_favorite_technologies(user_id)
            ],
        }

    def execute(self, user_name: str) -> Dict[str, Any]:
        """Raises EntityNotFoundError if the user does not exist."""
        page = self.content_cache.get_or_create(
            f"user:{user_name}", lambda: self._load(user_name)
        )
        if page is None:
            raise EntityNotFoundError("User", user_name)
        return page
