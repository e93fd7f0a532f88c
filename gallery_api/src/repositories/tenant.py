from __future__ import annotations

from typing import List

from sqlalchemy import select

from src.db.models.tenant import Tenant
from .base import BaseRepository


class TenantRepository(BaseRepository):
    """Read access to the tenant directory."""

    async def list_tenants(self) -> List[Tenant]:
        # Newest first; id keeps the order stable for equal timestamps.
        stmt = select(Tenant).order_by(Tenant.created_at.desc(), Tenant.id.asc())
        res = await self.scalars(stmt)
        return list(res)
