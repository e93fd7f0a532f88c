"""
Demo data for local development of the featured galleries listing.

Seeds:
- Two public galleries (aurora, northlight) and the reserved placeholder tenant
- Site settings, an admin author and a verified domain for aurora
- Published photo assets with tagged manifests

Every insert is idempotent, so running it twice is harmless.

Usage:
  python -m src.db.run_migrations upgrade head
  python -m src.db.seed
"""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.session import get_async_session

logger = logging.getLogger(__name__)

# Oldest first; each gets its own created_at so the listing order is stable.
DEMO_TENANTS: Sequence[Dict[str, str]] = (
    {"slug": "placeholder", "name": "Placeholder"},
    {"slug": "northlight", "name": "Northlight Photography"},
    {"slug": "aurora", "name": "Aurora Studio"},
)

DEMO_PHOTOS: Dict[str, List[List[str]]] = {
    "aurora": [
        ["sunset", "travel", "city"],
        ["sunset", "macro"],
        ["sunset", " travel ", ""],
        ["night", "city"],
    ],
    "northlight": [
        ["landscape", "snow"],
        ["landscape", "aurora"],
    ],
}


# PUBLIC_INTERFACE
async def seed_all() -> None:
    """Insert the demo galleries and commit."""
    async for session in get_async_session():
        tenant_ids = {}
        seeded_at = datetime.now(tz=timezone.utc)
        for age, tenant in enumerate(reversed(DEMO_TENANTS)):
            created_at = seeded_at - timedelta(minutes=age)
            tenant_ids[tenant["slug"]] = await _ensure_tenant(session, tenant["slug"], tenant["name"], created_at)

        aurora = tenant_ids["aurora"]
        await _upsert_setting(session, aurora, "site.name", "Aurora: Light & Travel")
        await _upsert_setting(session, aurora, "site.description", "Sunsets and city lights from the road.")
        await _ensure_user(session, aurora, "owner@aurora.example.com", "Ava Lindqvist", "admin", None)
        await _ensure_domain(session, aurora, "aurora.example.com", "verified")

        northlight = tenant_ids["northlight"]
        await _ensure_user(session, northlight, "hello@northlight.example.com", "Noor Haddad", "user", None)

        for slug, photos in DEMO_PHOTOS.items():
            for index, tags in enumerate(photos):
                await _ensure_photo(session, tenant_ids[slug], f"{slug}/photo-{index:03d}.jpg", tags)

        await session.commit()
        logger.info("Seeded %d demo tenants", len(tenant_ids))


async def _ensure_tenant(session: AsyncSession, slug: str, name: str, created_at: datetime) -> UUID:
    await session.execute(
        text(
            """
            INSERT INTO tenants (slug, name, created_at, updated_at)
            VALUES (:slug, :name, :created_at, :created_at)
            ON CONFLICT (slug) DO NOTHING
            """
        ),
        {"slug": slug, "name": name, "created_at": created_at},
    )
    res = await session.execute(text("SELECT id FROM tenants WHERE slug = :slug"), {"slug": slug})
    row = res.first()
    if not row:
        raise RuntimeError(f"Failed to create or load tenant {slug!r}")
    return row[0]


async def _upsert_setting(session: AsyncSession, tenant_id: UUID, key: str, value: str) -> None:
    await session.execute(
        text(
            """
            INSERT INTO settings (tenant_id, key, value)
            VALUES (:tid, :key, :value)
            ON CONFLICT ON CONSTRAINT uq_settings_tenant_key
            DO UPDATE SET value = EXCLUDED.value, updated_at = now()
            """
        ),
        {"tid": tenant_id, "key": key, "value": value},
    )


async def _ensure_user(
    session: AsyncSession,
    tenant_id: UUID,
    email: str,
    name: str,
    role: str,
    image: Optional[str],
) -> None:
    await session.execute(
        text(
            """
            INSERT INTO auth_users (tenant_id, email, name, role, image)
            VALUES (:tid, :email, :name, :role, :image)
            ON CONFLICT ON CONSTRAINT uq_auth_users_email DO NOTHING
            """
        ),
        {"tid": tenant_id, "email": email, "name": name, "role": role, "image": image},
    )


async def _ensure_domain(session: AsyncSession, tenant_id: UUID, domain: str, status: str) -> None:
    await session.execute(
        text(
            """
            INSERT INTO tenant_domains (tenant_id, domain, status)
            VALUES (:tid, :domain, :status)
            ON CONFLICT ON CONSTRAINT uq_tenant_domains_domain DO NOTHING
            """
        ),
        {"tid": tenant_id, "domain": domain, "status": status},
    )


async def _ensure_photo(session: AsyncSession, tenant_id: UUID, storage_key: str, tags: List[str]) -> None:
    manifest = {"version": 1, "data": {"tags": tags}}
    await session.execute(
        text(
            """
            INSERT INTO photo_assets (tenant_id, storage_key, sync_status, manifest)
            VALUES (:tid, :key, 'synced', CAST(:manifest AS jsonb))
            ON CONFLICT ON CONSTRAINT uq_photo_assets_tenant_storage_key DO NOTHING
            """
        ),
        {"tid": tenant_id, "key": storage_key, "manifest": json.dumps(manifest)},
    )


# PUBLIC_INTERFACE
def main() -> None:
    """Entrypoint to run the asynchronous seeding."""
    asyncio.run(seed_all())


if __name__ == "__main__":
    main()
