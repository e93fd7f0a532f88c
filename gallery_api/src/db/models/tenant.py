from __future__ import annotations

from sqlalchemy import Boolean, Index, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Base, UUIDPkMixin, TimestampMixin, TenantMixin


class Tenant(UUIDPkMixin, TimestampMixin, Base):
    """A photo gallery account. Lifecycle (status/banned) is managed elsewhere."""
    __tablename__ = "tenants"
    __table_args__ = (
        Index("ix_tenants_created_at", "created_at"),
    )

    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="active", server_default="active")
    banned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")


class TenantDomain(UUIDPkMixin, TenantMixin, TimestampMixin, Base):
    """Custom domain bound to a tenant; only `verified` rows are served."""
    __tablename__ = "tenant_domains"
    __table_args__ = (
        UniqueConstraint("domain", name="uq_tenant_domains_domain"),
        Index("ix_tenant_domains_tenant_id_status", "tenant_id", "status"),
    )

    domain: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="pending", server_default="pending")
