"""
Auth DTOs - Application Layer

Sign-in requests coming back from the browser and the session view returned
by ``GET /auth``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel

from techstacks.domain.entities.user import UserSession


@dataclass
class AuthenticateRequest:
    """``GET /auth/{provider}`` with the query string the provider sent back."""

    provider: str
    params: Dict[str, str] = field(default_factory=dict)


@dataclass
class AuthenticateResult:
    redirect_url: str
    session: Optional[UserSession] = None


class SessionDTO(BaseModel):
    session_id: str
    user_auth_id: Optional[int] = None
    user_name: Optional[str] = None
    display_name: Optional[str] = None
    provider: Optional[str] = None
    profile_url: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_session(cls, session: UserSession) -> "SessionDTO":
        return cls(
            session_id=session.id,
            user_auth_id=session.user_auth_id,
            user_name=session.user_name,
            display_name=session.display_name,
            provider=session.provider,
            profile_url=session.profile_url,
            created_at=session.created_at,
        )
