from __future__ import annotations

from fastapi import APIRouter, Depends

from src.core.deps import get_featured_galleries_service
from src.schemas.gallery import FeaturedGalleriesResponse
from src.services.featured_galleries import FeaturedGalleriesService

router = APIRouter(prefix="/featured-galleries", tags=["Galleries"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=FeaturedGalleriesResponse,
    summary="List featured galleries",
    description=(
        "Up to 20 of the most recently created active galleries, with site name, "
        "description, verified domain, primary author, published photo count and "
        "top tags. Keys are camelCase."
    ),
)
async def list_featured_galleries(
    service: FeaturedGalleriesService = Depends(get_featured_galleries_service),
) -> FeaturedGalleriesResponse:
    return await service.list_featured_galleries()
