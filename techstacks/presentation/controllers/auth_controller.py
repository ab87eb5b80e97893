"""
Auth Router - Presentation Layer

Sign-in through external identity providers. The session id travels in the
``ss-id`` cookie; the session itself lives in the persistent cache.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from techstacks.application.dtos.auth_dto import AuthenticateRequest, SessionDTO
from techstacks.application.use_cases.auth_use_cases import (
    AuthenticateUseCase,
    GetSessionUseCase,
    LogoutUseCase,
)
from techstacks.domain.entities.errors import (
    AuthenticationError,
    EntityNotFoundError,
    RequestValidationError,
)
from techstacks.infrastructure.auth.session_store import SESSION_COOKIE, SessionStore
from techstacks.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("", response_model=SessionDTO)
@inject
async def get_session(
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    get_session_use_case: GetSessionUseCase = Depends(
        Provide["get_session_use_case"]
    ),
) -> SessionDTO:
    """Return the signed-in session."""
    try:
        return get_session_use_case.execute(session_id)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": e.message, "reason": e.reason},
        )


@router.get("/logout")
@inject
async def logout(
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    logout_use_case: LogoutUseCase = Depends(Provide["logout_use_case"]),
) -> RedirectResponse:
    """Drop the session and send the browser home."""
    logout_use_case.execute(session_id)
    response = RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    response.delete_cookie(SESSION_COOKIE)
    return response


@router.get("/{provider}")
@inject
async def authenticate(
    provider: str,
    request: Request,
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    authenticate_use_case: AuthenticateUseCase = Depends(
        Provide["authenticate_use_case"]
    ),
    session_store: SessionStore = Depends(Provide["session_store"]),
) -> RedirectResponse:
    """
    Start a sign-in, or complete it when the provider calls back.

    Both legs answer with a redirect: to the provider first, then back to
    the configured redirect URL with the outcome appended.
    """
    auth_request = AuthenticateRequest(
        provider=provider, params=dict(request.query_params)
    )
    try:
        result = await authenticate_use_case.execute(
            auth_request, session_store.get(session_id)
        )
    except RequestValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": e.message, **e.details},
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": e.message, "reason": e.reason},
        )
    except Exception as e:
        logger.error("auth.authenticate.failure", provider=provider, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    response = RedirectResponse(result.redirect_url, status_code=status.HTTP_302_FOUND)
    if result.session is not None and result.session.is_authenticated:
        response.set_cookie(
            SESSION_COOKIE,
            result.session.id,
            httponly=True,
            samesite="lax",
            max_age=int(session_store.expires_in.total_seconds()),
        )
    return response
