"""
Content DTOs - Application Layer

Page data for the server-rendered views. DTOs are dumped to JSON friendly
dicts before they are cached so any cache client can hold them.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from techstacks.domain.entities.technology import TechnologyTier


class TechnologyStackDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    vendor_name: Optional[str] = None
    description: Optional[str] = None
    app_url: Optional[str] = None
    screenshot_url: Optional[str] = None
    details: Optional[str] = None
    last_modified: datetime


class TechnologyDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    vendor_name: Optional[str] = None
    vendor_url: Optional[str] = None
    product_url: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None
    tier: Optional[TechnologyTier] = None
    last_modified: datetime


class UserProfileDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_name: str
    display_name: Optional[str] = None
    default_profile_url: Optional[str] = None
    created_date: datetime
