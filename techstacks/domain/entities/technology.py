"""
Domain Entities - Technology

Technology stacks, the technologies they are built from, the choices that
link the two, and the favorites users keep. Rows are owned by the content
services; the web host only reads them for sitemaps, views and queries.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TechnologyTier(str, Enum):
    """Layer of a stack that a technology belongs to."""

    PROGRAMMING_LANGUAGE = "ProgrammingLanguage"
    CLIENT = "Client"
    HTTP = "Http"
    SERVER = "Server"
    DATA = "Data"
    SOFTWARE_INFRASTRUCTURE = "SoftwareInfrastructure"
    OPERATING_SYSTEM = "OperatingSystem"
    HARDWARE_INFRASTRUCTURE = "HardwareInfrastructure"
    THIRD_PARTY_SERVICES = "ThirdPartyServices"


@dataclass
class TechnologyStack:
    """A published stack of technologies used by a product."""

    id: Optional[int] = None
    name: str = ""
    slug: str = ""
    vendor_name: Optional[str] = None
    description: Optional[str] = None
    app_url: Optional[str] = None
    screenshot_url: Optional[str] = None
    details: Optional[str] = None
    is_locked: bool = False
    owner_id: Optional[str] = None
    created_by: Optional[str] = None
    last_modified_by: Optional[str] = None
    created: datetime = field(default_factory=_now)
    last_modified: datetime = field(default_factory=_now)


@dataclass
class Technology:
    """A single technology that stacks can choose."""

    id: Optional[int] = None
    name: str = ""
    slug: str = ""
    vendor_name: Optional[str] = None
    vendor_url: Optional[str] = None
    product_url: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None
    tier: Optional[TechnologyTier] = None
    is_locked: bool = False
    logo_approved: bool = False
    owner_id: Optional[str] = None
    created_by: Optional[str] = None
    last_modified_by: Optional[str] = None
    created: datetime = field(default_factory=_now)
    last_modified: datetime = field(default_factory=_now)


@dataclass
class TechnologyChoice:
    """Join record between a stack and one of its technologies."""

    technology_id: int
    technology_stack_id: int
    id: Optional[int] = None
    justification: Optional[str] = None
    owner_id: Optional[str] = None
    created_by: Optional[str] = None
    last_modified_by: Optional[str] = None
    created: datetime = field(default_factory=_now)
    last_modified: datetime = field(default_factory=_now)


@dataclass
class UserFavoriteTechnologyStack:
    user_id: str
    technology_stack_id: int
    id: Optional[int] = None
    last_modified: datetime = field(default_factory=_now)


@dataclass
class UserFavoriteTechnology:
    user_id: str
    technology_id: int
    id: Optional[int] = None
    last_modified: datetime = field(default_factory=_now)
