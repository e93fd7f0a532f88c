from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.session import get_async_session
from src.services.featured_galleries import FeaturedGalleriesService


# PUBLIC_INTERFACE
def get_featured_galleries_service(
    session: AsyncSession = Depends(get_async_session),
) -> FeaturedGalleriesService:
    """
    Request-scoped FeaturedGalleriesService.

    The session carries no tenant scope: the listing reads across tenants and
    every query filters on tenant_id itself.
    """
    return FeaturedGalleriesService(session)
