from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TenantSummary(BaseModel):
    """Tenant directory entry as seen by the gallery listing."""
    id: UUID = Field(..., description="Tenant id")
    slug: str = Field(..., description="URL slug")
    name: str = Field(..., description="Default display name")
    status: str = Field(..., description="Lifecycle status, e.g. active/suspended")
    banned: bool = Field(False, description="Banned by platform moderation")
    created_at: datetime = Field(..., description="Tenant creation time")

    model_config = ConfigDict(from_attributes=True)


class _CamelModel(BaseModel):
    # Public JSON uses camelCase keys; Python code keeps snake_case.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GalleryAuthor(_CamelModel):
    """Gallery owner shown on the card."""
    name: str = Field(..., description="Display name")
    avatar: Optional[str] = Field(None, description="Avatar image URL")


class FeaturedGallery(_CamelModel):
    """One card of the featured galleries listing."""
    id: UUID = Field(..., description="Tenant id")
    name: str = Field(..., description="site.name setting, else tenant name")
    slug: str = Field(..., description="Tenant slug")
    domain: Optional[str] = Field(None, description="First verified custom domain")
    description: Optional[str] = Field(None, description="site.description setting")
    author: Optional[GalleryAuthor] = Field(None, description="Primary gallery author")
    photo_count: int = Field(0, ge=0, description="Published photos (synced or conflict)")
    tags: List[str] = Field(default_factory=list, description="Up to five most used tags")
    created_at: Union[str, datetime] = Field(..., description="Tenant creation time (ISO-8601, UTC)")


class FeaturedGalleriesResponse(_CamelModel):
    """Envelope returned by the featured galleries endpoint."""
    galleries: List[FeaturedGallery] = Field(default_factory=list)
