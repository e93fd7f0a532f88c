from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import Executable, Row
from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """
    Base class for read repositories.

    Gallery listings read across tenants, so the session carries no tenant
    scope; every query filters on tenant_id explicitly.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute a SQLAlchemy statement."""
        return await self.session.execute(statement, params or {})

    async def scalars(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return scalars."""
        result = await self.execute(statement, params)
        return result.scalars()

    async def rows(self, statement: Executable, params: Optional[dict[str, Any]] = None) -> List[Row]:
        """Execute and return every result row (attribute access by label)."""
        result = await self.execute(statement, params)
        return list(result.all())
