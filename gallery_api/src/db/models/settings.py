from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Base, UUIDPkMixin, TimestampMixin, TenantMixin


class SiteSetting(UUIDPkMixin, TenantMixin, TimestampMixin, Base):
    """Sparse key/value configuration per tenant (e.g. site.name)."""
    __tablename__ = "settings"
    __table_args__ = (
        UniqueConstraint("tenant_id", "key", name="uq_settings_tenant_key"),
        Index("ix_settings_tenant_id", "tenant_id"),
    )

    key: Mapped[str] = mapped_column(Text, nullable=False)
    value: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
