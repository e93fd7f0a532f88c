from __future__ import annotations

import logging
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.normalize import normalize_date
from src.repositories.gallery import GalleryRepository
from src.schemas.gallery import (
    FeaturedGalleriesResponse,
    FeaturedGallery,
    GalleryAuthor,
    TenantSummary,
)
from src.services.base import BaseService
from src.services.tenant import TenantService

logger = logging.getLogger(__name__)

FEATURED_GALLERY_LIMIT = 20
POPULAR_TAG_LIMIT = 5
RESERVED_TENANT_SLUGS = frozenset({"root", "placeholder"})


def is_featurable(tenant: TenantSummary) -> bool:
    """Active, not banned, and not one of the reserved system tenants."""
    return (
        not tenant.banned
        and tenant.status == "active"
        and tenant.slug not in RESERVED_TENANT_SLUGS
    )


class FeaturedGalleriesService(BaseService):
    """
    Builds the public "featured galleries" listing.

    Reads the tenant directory, keeps the first FEATURED_GALLERY_LIMIT
    featurable tenants, then joins settings, authors, verified domains, photo
    counts and popular tags onto each of them. Read-only; database errors
    propagate to the caller unchanged.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.tenant_service = TenantService(session)
        self.gallery_repo = GalleryRepository(session)

    # PUBLIC_INTERFACE
    async def list_featured_galleries(self) -> FeaturedGalleriesResponse:
        """
        Return up to FEATURED_GALLERY_LIMIT gallery cards in directory order.

        Missing related data falls back to defaults: name -> tenant name,
        description/domain/author -> None, photo_count -> 0, tags -> [].
        """
        tenants = await self.tenant_service.list_tenants()
        featured = [t for t in tenants if is_featurable(t)][:FEATURED_GALLERY_LIMIT]
        logger.debug("Featured galleries: %d of %d tenants eligible", len(featured), len(tenants))

        tenant_ids = [t.id for t in featured]
        if not tenant_ids:
            return FeaturedGalleriesResponse(galleries=[])

        settings_rows = await self.gallery_repo.list_site_settings(tenant_ids)
        author_rows = await self.gallery_repo.list_authors(tenant_ids)
        domain_rows = await self.gallery_repo.list_verified_domains(tenant_ids)
        count_rows = await self.gallery_repo.count_published_photos(tenant_ids)

        # One query per tenant; N is bounded by FEATURED_GALLERY_LIMIT.
        tag_map: Dict[UUID, List[str]] = {}
        for tenant_id in tenant_ids:
            tag_rows = await self.gallery_repo.list_popular_tags(tenant_id, limit=POPULAR_TAG_LIMIT)
            tags = [tag for tag in (_clean_tag(r.tag) for r in tag_rows) if tag][:POPULAR_TAG_LIMIT]
            if tags:
                tag_map[tenant_id] = tags

        settings_map: Dict[UUID, Dict[str, Optional[str]]] = {}
        for row in settings_rows:
            settings_map.setdefault(row.tenant_id, {})[row.key] = row.value

        # First row per tenant wins; the queries order by priority.
        author_map: Dict[UUID, GalleryAuthor] = {}
        for row in author_rows:
            if row.tenant_id not in author_map:
                author_map[row.tenant_id] = GalleryAuthor(name=row.name, avatar=row.image)

        domain_map: Dict[UUID, str] = {}
        for row in domain_rows:
            domain_map.setdefault(row.tenant_id, row.domain)

        count_map: Dict[UUID, int] = {row.tenant_id: int(row.count or 0) for row in count_rows}

        galleries = []
        for tenant in featured:
            site = settings_map.get(tenant.id, {})
            galleries.append(
                FeaturedGallery(
                    id=tenant.id,
                    name=_coalesce(site.get("site.name"), tenant.name),
                    slug=tenant.slug,
                    domain=domain_map.get(tenant.id),
                    description=site.get("site.description"),
                    author=author_map.get(tenant.id),
                    photo_count=count_map.get(tenant.id, 0),
                    tags=tag_map.get(tenant.id, []),
                    created_at=normalize_date(tenant.created_at) or tenant.created_at,
                )
            )

        logger.info("Built %d featured galleries", len(galleries))
        return FeaturedGalleriesResponse(galleries=galleries)


def _clean_tag(tag: Optional[str]) -> Optional[str]:
    if tag is None:
        return None
    tag = tag.strip()
    return tag or None


def _coalesce(value: Optional[str], fallback: str) -> str:
    return fallback if value is None else value
