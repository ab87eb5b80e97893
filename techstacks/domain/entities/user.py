"""
Domain Entities - Users and Sessions

Users are created the first time they sign in through an external identity
provider. ``UserAuthDetails`` keeps the per-provider tokens and
``UserSession`` is the custom session type stored for signed-in browsers.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UserAuth:
    """Registered user."""

    user_name: str
    id: Optional[int] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    default_profile_url: Optional[str] = None
    created_date: datetime = field(default_factory=_now)
    modified_date: datetime = field(default_factory=_now)


@dataclass
class UserAuthDetails:
    """Tokens and profile data a provider returned for a user."""

    provider: str
    user_id: str
    id: Optional[int] = None
    user_auth_id: Optional[int] = None
    user_name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    profile_url: Optional[str] = None
    access_token: Optional[str] = None
    access_token_secret: Optional[str] = None
    created_date: datetime = field(default_factory=_now)
    modified_date: datetime = field(default_factory=_now)


@dataclass
class AuthTokens:
    """Result of a completed provider sign-in, before it is persisted."""

    provider: str
    user_id: str
    user_name: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    profile_url: Optional[str] = None
    access_token: Optional[str] = None
    access_token_secret: Optional[str] = None


@dataclass
class UserSession:
    """Custom session persisted in the cache between requests."""

    id: str = field(default_factory=lambda: uuid4().hex)
    user_auth_id: Optional[int] = None
    user_name: Optional[str] = None
    display_name: Optional[str] = None
    provider: Optional[str] = None
    profile_url: Optional[str] = None
    is_authenticated: bool = False
    created_at: datetime = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserSession":
        values = dict(data)
        created_at = values.get("created_at")
        if isinstance(created_at, str):
            values["created_at"] = datetime.fromisoformat(created_at)
        return cls(**values)
