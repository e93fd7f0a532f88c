"""
Tests for FeaturedGalleriesService: tenant filtering, the 20-gallery cap,
join defaults and tag cleanup.
"""

from datetime import datetime

import pytest

from conftest import make_tenant, row
from src.services.featured_galleries import (
    FEATURED_GALLERY_LIMIT,
    POPULAR_TAG_LIMIT,
    is_featurable,
)


class TestTenantSelection:
    """Which tenants make it into the listing, and in what order."""

    @pytest.mark.asyncio
    async def test_excludes_banned_inactive_and_reserved_tenants(self, build_service):
        keep = make_tenant("acme")
        tenants = [
            make_tenant("banned", banned=True),
            make_tenant("suspended", status="suspended"),
            make_tenant("pending", status="pending"),
            make_tenant("root"),
            make_tenant("placeholder"),
            keep,
        ]

        result = await build_service(tenants).list_featured_galleries()

        assert [g.slug for g in result.galleries] == ["acme"]
        assert result.galleries[0].id == keep.id

    @pytest.mark.asyncio
    async def test_caps_listing_at_twenty_in_directory_order(self, build_service, recent_tenants):
        tenants = recent_tenants(30)

        result = await build_service(tenants).list_featured_galleries()

        assert len(result.galleries) == FEATURED_GALLERY_LIMIT
        assert [g.slug for g in result.galleries] == [t.slug for t in tenants[:20]]

    @pytest.mark.asyncio
    async def test_cap_applies_after_filtering(self, build_service, recent_tenants):
        blocked = [make_tenant(f"blocked-{i}", banned=True) for i in range(5)]
        tenants = blocked + recent_tenants(25)

        result = await build_service(tenants).list_featured_galleries()

        assert len(result.galleries) == 20
        assert all(not g.slug.startswith("blocked") for g in result.galleries)
        assert result.galleries[0].slug == "gallery-0"

    @pytest.mark.asyncio
    async def test_no_eligible_tenants_short_circuits(self, build_service, gallery_repo):
        service = build_service([make_tenant("root"), make_tenant("x", banned=True)])

        result = await service.list_featured_galleries()

        assert result.model_dump() == {"galleries": []}
        assert service.tenant_service.calls == 1
        assert gallery_repo.calls == []

    def test_is_featurable(self):
        assert is_featurable(make_tenant("acme"))
        assert not is_featurable(make_tenant("acme", status="Active"))
        assert not is_featurable(make_tenant("placeholder"))


class TestQueries:
    """Which reads are issued, with which tenant ids."""

    @pytest.mark.asyncio
    async def test_batched_queries_then_one_tag_query_per_tenant(self, build_service, gallery_repo, recent_tenants):
        tenants = recent_tenants(3)
        ids = [t.id for t in tenants]

        await build_service(tenants).list_featured_galleries()

        assert gallery_repo.query_names() == [
            "list_site_settings",
            "list_authors",
            "list_verified_domains",
            "count_published_photos",
            "list_popular_tags",
            "list_popular_tags",
            "list_popular_tags",
        ]
        for call in gallery_repo.calls[:4]:
            assert call[1] == ids
        assert [c[1] for c in gallery_repo.calls[4:]] == ids
        assert all(c[2] == POPULAR_TAG_LIMIT for c in gallery_repo.calls[4:])

    @pytest.mark.asyncio
    async def test_query_failure_propagates(self, build_service, gallery_repo):
        gallery_repo.fail_on = "list_verified_domains"

        with pytest.raises(RuntimeError, match="list_verified_domains failed"):
            await build_service([make_tenant("acme")]).list_featured_galleries()


class TestGalleryAssembly:
    """How joined rows and defaults end up on each gallery card."""

    @pytest.mark.asyncio
    async def test_site_settings_override_tenant_name(self, build_service, gallery_repo):
        acme = make_tenant("acme", name="acme-default")
        gallery_repo.settings = [
            row(tenant_id=acme.id, key="site.name", value="Acme Gallery"),
            row(tenant_id=acme.id, key="site.description", value="Photos from Acme"),
        ]

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.name == "Acme Gallery"
        assert gallery.description == "Photos from Acme"

    @pytest.mark.asyncio
    async def test_defaults_when_related_data_missing(self, build_service):
        acme = make_tenant("acme", name="Acme Default")

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.name == "Acme Default"
        assert gallery.description is None
        assert gallery.domain is None
        assert gallery.author is None
        assert gallery.photo_count == 0
        assert gallery.tags == []

    @pytest.mark.asyncio
    async def test_empty_site_name_is_kept(self, build_service, gallery_repo):
        acme = make_tenant("acme", name="Acme Default")
        gallery_repo.settings = [row(tenant_id=acme.id, key="site.name", value="")]

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.name == ""

    @pytest.mark.asyncio
    async def test_first_author_and_domain_win(self, build_service, gallery_repo):
        acme = make_tenant("acme")
        gallery_repo.authors = [
            row(tenant_id=acme.id, name="Ada Admin", image="https://cdn.example.com/ada.png"),
            row(tenant_id=acme.id, name="Sam Super", image=None),
        ]
        gallery_repo.domains = [
            row(tenant_id=acme.id, domain="acme.example.com"),
            row(tenant_id=acme.id, domain="photos.acme.example.com"),
        ]

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.author.name == "Ada Admin"
        assert gallery.author.avatar == "https://cdn.example.com/ada.png"
        assert gallery.domain == "acme.example.com"

    @pytest.mark.asyncio
    async def test_author_without_image_has_null_avatar(self, build_service, gallery_repo):
        acme = make_tenant("acme")
        gallery_repo.authors = [row(tenant_id=acme.id, name="Ada Admin", image=None)]

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.author.model_dump(by_alias=True) == {"name": "Ada Admin", "avatar": None}

    @pytest.mark.asyncio
    async def test_rows_are_joined_to_the_right_tenant(self, build_service, gallery_repo):
        acme, zen = make_tenant("acme"), make_tenant("zen")
        gallery_repo.counts = [row(tenant_id=zen.id, count=7), row(tenant_id=acme.id, count=42)]
        gallery_repo.domains = [row(tenant_id=zen.id, domain="zen.example.com")]

        galleries = (await build_service([acme, zen]).list_featured_galleries()).galleries

        assert [(g.slug, g.photo_count, g.domain) for g in galleries] == [
            ("acme", 42, None),
            ("zen", 7, "zen.example.com"),
        ]

    @pytest.mark.asyncio
    async def test_tags_are_trimmed_and_blanks_dropped(self, build_service, gallery_repo):
        acme = make_tenant("acme")
        gallery_repo.tags[acme.id] = [
            row(tag=" sunset ", count=4),
            row(tag="   ", count=3),
            row(tag=None, count=2),
            row(tag="travel", count=1),
        ]

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.tags == ["sunset", "travel"]

    @pytest.mark.asyncio
    async def test_tags_capped_when_repository_returns_more(self, build_service, gallery_repo):
        acme = make_tenant("acme")
        gallery_repo.tags[acme.id] = [row(tag=f"tag-{i}", count=10 - i) for i in range(8)]

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert len(gallery.tags) == POPULAR_TAG_LIMIT
        assert gallery.tags == ["tag-0", "tag-1", "tag-2", "tag-3", "tag-4"]

    @pytest.mark.asyncio
    async def test_blank_tags_do_not_count_towards_cap(self, build_service, gallery_repo):
        acme = make_tenant("acme")
        gallery_repo.tags[acme.id] = [row(tag="  ", count=9)] + [
            row(tag=f"tag-{i}", count=8 - i) for i in range(5)
        ]

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.tags == ["tag-0", "tag-1", "tag-2", "tag-3", "tag-4"]

    @pytest.mark.asyncio
    async def test_example_gallery(self, build_service, gallery_repo):
        acme = make_tenant("acme", name="acme")
        gallery_repo.settings = [row(tenant_id=acme.id, key="site.name", value="Acme Gallery")]
        gallery_repo.domains = [row(tenant_id=acme.id, domain="acme.example.com")]
        gallery_repo.counts = [row(tenant_id=acme.id, count=42)]
        frequencies = {"sunset": 10, "travel": 7, "city": 3, "macro": 3, "night": 1, "dawn": 1}
        # Same ordering the SQL applies: count desc, then tag asc.
        ranked = sorted(frequencies.items(), key=lambda kv: (-kv[1], kv[0]))
        gallery_repo.tags[acme.id] = [row(tag=t, count=c) for t, c in ranked]

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.name == "Acme Gallery"
        assert gallery.domain == "acme.example.com"
        assert gallery.photo_count == 42
        assert gallery.tags == ["sunset", "travel", "city", "macro", "dawn"]

    @pytest.mark.asyncio
    async def test_created_at_is_normalized_to_utc_iso(self, build_service):
        acme = make_tenant("acme", created_at=datetime(2024, 5, 1, 8, 30))

        gallery = (await build_service([acme]).list_featured_galleries()).galleries[0]

        assert gallery.created_at == "2024-05-01T08:30:00.000Z"

    @pytest.mark.asyncio
    async def test_serializes_with_camel_case_keys(self, build_service, gallery_repo):
        acme = make_tenant("acme")
        gallery_repo.counts = [row(tenant_id=acme.id, count=3)]

        payload = (await build_service([acme]).list_featured_galleries()).model_dump(mode="json", by_alias=True)

        card = payload["galleries"][0]
        assert set(card) == {
            "id", "name", "slug", "domain", "description",
            "author", "photoCount", "tags", "createdAt",
        }
        assert card["id"] == str(acme.id)
        assert card["photoCount"] == 3
