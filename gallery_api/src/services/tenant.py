from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from src.repositories.tenant import TenantRepository
from src.schemas.gallery import TenantSummary
from src.services.base import BaseService


class TenantService(BaseService):
    """Tenant directory. Returns every tenant, newest first, with status flags."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.tenant_repo = TenantRepository(session)

    # PUBLIC_INTERFACE
    async def list_tenants(self) -> List[TenantSummary]:
        tenants = await self.tenant_repo.list_tenants()
        return [TenantSummary.model_validate(t) for t in tenants]
