from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Base, UUIDPkMixin, TimestampMixin, TenantMixin


# Assets in these states are considered published in the gallery.
PUBLISHED_SYNC_STATES = ("synced", "conflict")


class PhotoAsset(UUIDPkMixin, TenantMixin, TimestampMixin, Base):
    """
    One photo tracked by the storage sync process.

    `manifest` holds the photo metadata document; tags live at
    manifest -> 'data' -> 'tags' as a JSON array of strings.
    """
    __tablename__ = "photo_assets"
    __table_args__ = (
        UniqueConstraint("tenant_id", "storage_key", name="uq_photo_assets_tenant_storage_key"),
        Index("ix_photo_assets_tenant_id_sync_status", "tenant_id", "sync_status"),
    )

    storage_key: Mapped[str] = mapped_column(Text, nullable=False)
    sync_status: Mapped[str] = mapped_column(Text, nullable=False, default="pending", server_default="pending")
    manifest: Mapped[Optional[dict]] = mapped_column(JSONB, nullable=True)
