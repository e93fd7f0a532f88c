from __future__ import annotations

from typing import List, Sequence
from uuid import UUID

from sqlalchemy import Row, Select, Text, case, func, literal, select
from sqlalchemy.dialects.postgresql import JSONB

from src.db.models.photo import PUBLISHED_SYNC_STATES, PhotoAsset
from src.db.models.security import AuthUser
from src.db.models.settings import SiteSetting
from src.db.models.tenant import TenantDomain
from .base import BaseRepository


SITE_SETTING_KEYS = ("site.name", "site.description")
VERIFIED_DOMAIN_STATUS = "verified"


def site_settings_query(tenant_ids: Sequence[UUID]) -> Select:
    return select(SiteSetting.tenant_id, SiteSetting.key, SiteSetting.value).where(
        SiteSetting.tenant_id.in_(tenant_ids),
        SiteSetting.key.in_(SITE_SETTING_KEYS),
    )


def authors_query(tenant_ids: Sequence[UUID]) -> Select:
    """
    Candidate gallery authors, best candidate first per tenant.

    admin sorts before superadmin, which sorts before any other role; within
    a role the oldest account wins.
    """
    role_rank = case(
        (AuthUser.role == "admin", 0),
        (AuthUser.role == "superadmin", 1),
        else_=2,
    )
    return (
        select(AuthUser.tenant_id, AuthUser.name, AuthUser.image)
        .where(AuthUser.tenant_id.in_(tenant_ids))
        .order_by(role_rank, AuthUser.created_at.asc())
    )


def verified_domains_query(tenant_ids: Sequence[UUID]) -> Select:
    return (
        select(TenantDomain.tenant_id, TenantDomain.domain)
        .where(
            TenantDomain.tenant_id.in_(tenant_ids),
            TenantDomain.status == VERIFIED_DOMAIN_STATUS,
        )
        .order_by(TenantDomain.created_at.asc(), TenantDomain.domain.asc())
    )


def photo_counts_query(tenant_ids: Sequence[UUID]) -> Select:
    return (
        select(PhotoAsset.tenant_id, func.count().label("count"))
        .where(
            PhotoAsset.tenant_id.in_(tenant_ids),
            PhotoAsset.sync_status.in_(PUBLISHED_SYNC_STATES),
        )
        .group_by(PhotoAsset.tenant_id)
    )


def popular_tags_query(tenant_id: UUID, limit: int) -> Select:
    """
    Most frequent manifest tags of one tenant's published photos.

    Expands manifest -> 'data' -> 'tags', trims each entry and drops blanks.
    Ordered by frequency, then alphabetically so equal counts are stable.
    """
    # Explicit `->` keeps the SQL valid before PostgreSQL 14 jsonb subscripting.
    data = PhotoAsset.manifest.op("->", return_type=JSONB)(literal("data", Text))
    tags_path = data.op("->", return_type=JSONB)(literal("tags", Text))
    tag = func.nullif(
        func.trim(func.jsonb_array_elements_text(tags_path)),
        "",
    ).label("tag")
    tag_items = (
        select(tag)
        .where(
            PhotoAsset.tenant_id == tenant_id,
            PhotoAsset.sync_status.in_(PUBLISHED_SYNC_STATES),
        )
        .subquery("tag_items")
    )
    tag_count = func.count().label("count")
    return (
        select(tag_items.c.tag, tag_count)
        .where(tag_items.c.tag.is_not(None), tag_items.c.tag != "")
        .group_by(tag_items.c.tag)
        .order_by(tag_count.desc(), tag_items.c.tag.asc())
        .limit(limit)
    )


class GalleryRepository(BaseRepository):
    """Cross-tenant reads backing the featured galleries listing."""

    async def list_site_settings(self, tenant_ids: Sequence[UUID]) -> List[Row]:
        return await self.rows(site_settings_query(tenant_ids))

    async def list_authors(self, tenant_ids: Sequence[UUID]) -> List[Row]:
        return await self.rows(authors_query(tenant_ids))

    async def list_verified_domains(self, tenant_ids: Sequence[UUID]) -> List[Row]:
        return await self.rows(verified_domains_query(tenant_ids))

    async def count_published_photos(self, tenant_ids: Sequence[UUID]) -> List[Row]:
        return await self.rows(photo_counts_query(tenant_ids))

    async def list_popular_tags(self, tenant_id: UUID, *, limit: int = 5) -> List[Row]:
        return await self.rows(popular_tags_query(tenant_id, limit))
