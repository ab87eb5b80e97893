"""
Views Router - Presentation Layer

Server-rendered pages for stacks, technologies and users. Registered last
because ``/{slug}`` matches any single path segment.
"""

from pathlib import Path
from typing import Any, Callable, Dict

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from techstacks.application.models.host_config import HostConfig
from techstacks.application.use_cases.content_use_cases import (
    GetHomePageUseCase,
    GetStackPageUseCase,
    GetTechnologyPageUseCase,
    GetUserPageUseCase,
)
from techstacks.domain.entities.errors import EntityNotFoundError
from techstacks.shared import get_logger

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Views"], include_in_schema=False)


def _render(
    request: Request,
    template: str,
    host_config: HostConfig,
    load: Callable[[], Dict[str, Any]],
) -> HTMLResponse:
    try:
        context = load()
    except EntityNotFoundError as e:
        logger.info("views.not_found", path=request.url.path, entity=e.entity)
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"app_name": host_config.app_name, "message": e.message},
            status_code=404,
        )
    return templates.TemplateResponse(
        request, template, {"app_name": host_config.app_name, **context}
    )


@router.get("/", response_class=HTMLResponse)
@inject
async def home(
    request: Request,
    use_case: GetHomePageUseCase = Depends(Provide["get_home_page_use_case"]),
    host_config: HostConfig = Depends(Provide["host_config"]),
) -> HTMLResponse:
    return _render(request, "home.html", host_config, use_case.execute)


@router.get("/tech/{slug}", response_class=HTMLResponse)
@inject
async def technology(
    slug: str,
    request: Request,
    use_case: GetTechnologyPageUseCase = Depends(
        Provide["get_technology_page_use_case"]
    ),
    host_config: HostConfig = Depends(Provide["host_config"]),
) -> HTMLResponse:
    return _render(
        request, "technology.html", host_config, lambda: use_case.execute(slug)
    )


@router.get("/users/{user_name}", response_class=HTMLResponse)
@inject
async def user(
    user_name: str,
    request: Request,
    use_case: GetUserPageUseCase = Depends(Provide["get_user_page_use_case"]),
    host_config: HostConfig = Depends(Provide["host_config"]),
) -> HTMLResponse:
    return _render(
        request, "user.html", host_config, lambda: use_case.execute(user_name)
    )


@router.get("/{slug}", response_class=HTMLResponse)
@inject
async def stack(
    slug: str,
    request: Request,
    use_case: GetStackPageUseCase = Depends(Provide["get_stack_page_use_case"]),
    host_config: HostConfig = Depends(Provide["host_config"]),
) -> HTMLResponse:
    return _render(request, "stack.html", host_config, lambda: use_case.execute(slug))
