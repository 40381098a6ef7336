"""
Tests for item storage backends and the sitemap builder.
"""

from datetime import datetime, timezone

import pytest

from portfolio.config import Settings
from portfolio.core.models import ShowcaseItem
from portfolio.services.showcase import ShowcaseStore
from portfolio.services.sitemap import build_sitemap
from portfolio.storage import InMemoryItemStorage, LocalFileItemStorage, create_local_storage


# =============================================================================
# Storage
# =============================================================================


class TestInMemoryItemStorage:
    @pytest.mark.asyncio
    async def test_records_are_copied(self):
        storage = InMemoryItemStorage()
        record = {"id": "a", "keywords": ["x"]}
        await storage.put("a", record)

        record["keywords"].append("y")
        loaded = await storage.get("a")
        loaded["keywords"].append("z")

        assert (await storage.get("a"))["keywords"] == ["x"]

    @pytest.mark.asyncio
    async def test_delete_reports_existence(self):
        storage = InMemoryItemStorage()
        await storage.put("a", {"id": "a"})

        assert await storage.delete("a") is True
        assert await storage.delete("a") is False
        assert await storage.get("a") is None


class TestLocalFileItemStorage:
    @pytest.mark.asyncio
    async def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "items.json"
        await LocalFileItemStorage(path).put("a", {"id": "a", "default_title": "Stem AI"})

        reopened = LocalFileItemStorage(path)
        assert await reopened.get("a") == {"id": "a", "default_title": "Stem AI"}
        assert await reopened.get_all() == [{"id": "a", "default_title": "Stem AI"}]

    @pytest.mark.asyncio
    async def test_missing_file_is_empty(self, tmp_path):
        storage = LocalFileItemStorage(tmp_path / "nested" / "items.json")

        assert await storage.get_all() == []
        assert await storage.delete("a") is False

    @pytest.mark.asyncio
    async def test_store_round_trip(self, tmp_path, make_draft):
        path = tmp_path / "items.json"
        item = await ShowcaseStore(LocalFileItemStorage(path)).create(make_draft())

        reloaded = await ShowcaseStore(LocalFileItemStorage(path)).resolve_by_slug("voice-ai")
        assert reloaded == item


class TestCreateLocalStorage:
    def test_memory(self):
        assert isinstance(create_local_storage(Settings(storage_backend="memory")), InMemoryItemStorage)

    def test_file(self, tmp_path):
        storage = create_local_storage(Settings(storage_backend="file", data_dir=str(tmp_path)))

        assert isinstance(storage, LocalFileItemStorage)
        assert storage.path.parent == tmp_path

    def test_unknown(self):
        with pytest.raises(ValueError):
            create_local_storage(Settings(storage_backend="redis"))


# =============================================================================
# Sitemap
# =============================================================================


class TestBuildSitemap:
    def test_entries(self):
        updated = datetime(2024, 5, 1, tzinfo=timezone.utc)
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        items = [
            ShowcaseItem.model_validate({
                "id": "a",
                "slug_nl": "stem-ai",
                "slug_en": "voice-ai",
                "updated_at": updated,
            }),
            ShowcaseItem.model_validate({"id": "legacy", "slug": "oud-project"}),
            ShowcaseItem.model_validate({"id": "hidden", "slug_en": "secret", "is_public": False}),
        ]

        entries = build_sitemap(items, "https://example.com/", now=now)
        urls = [entry.url for entry in entries]

        assert urls == [
            "https://example.com/nl",
            "https://example.com/en",
            "https://example.com/nl/project/stem-ai",
            "https://example.com/en/project/voice-ai",
            "https://example.com/nl/project/oud-project",
            "https://example.com/en/project/oud-project",
        ]
        assert entries[0].last_modified == now
        assert entries[2].last_modified == updated
        assert entries[2].priority == 0.8
