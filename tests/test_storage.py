"""
Tests for the local document stores.
"""

import pytest

from blogapi.storage import (
    InMemoryMetadataStorage,
    JsonFileMetadataStorage,
    create_local_storage,
)


@pytest.fixture
def store():
    return InMemoryMetadataStorage()


class TestInMemoryMetadataStorage:
    @pytest.mark.asyncio
    async def test_save_and_get(self, store):
        await store.save("posts", "p1", {"title": "One"})
        assert await store.get("posts", "p1") == {"title": "One"}
        assert await store.get("posts", "missing") is None
        assert await store.get("nothing", "p1") is None

    @pytest.mark.asyncio
    async def test_returns_copies(self, store):
        await store.save("posts", "p1", {"title": "One"})
        doc = await store.get("posts", "p1")
        doc["title"] = "Changed"

        assert (await store.get("posts", "p1"))["title"] == "One"

    @pytest.mark.asyncio
    async def test_query_filters_and_slices_in_insertion_order(self, store):
        for i in range(6):
            await store.save("posts", f"p{i}", {"n": i, "category": "even" if i % 2 == 0 else "odd"})

        evens = await store.query("posts", {"category": "even"})
        assert [d["n"] for d in evens] == [0, 2, 4]

        page = await store.query("posts", limit=2, offset=3)
        assert [d["n"] for d in page] == [3, 4]

        assert await store.query("posts", offset=10) == []
        assert await store.query("empty") == []

    @pytest.mark.asyncio
    async def test_update(self, store):
        await store.save("posts", "p1", {"title": "One", "content": "x"})
        assert await store.update("posts", "p1", {"title": "Uno"})
        assert await store.get("posts", "p1") == {"title": "Uno", "content": "x"}
        assert not await store.update("posts", "missing", {"title": "?"})

    @pytest.mark.asyncio
    async def test_delete(self, store):
        await store.save("posts", "p1", {"title": "One"})
        assert await store.delete("posts", "p1")
        assert not await store.delete("posts", "p1")
        assert await store.get("posts", "p1") is None


class TestJsonFileMetadataStorage:
    @pytest.mark.asyncio
    async def test_survives_reload(self, tmp_path):
        store = JsonFileMetadataStorage(str(tmp_path))
        await store.save("posts", "p1", {"title": "One"})
        await store.save("posts", "p2", {"title": "Two"})
        await store.update("posts", "p2", {"title": "Deux"})
        await store.delete("posts", "p1")

        reloaded = JsonFileMetadataStorage(str(tmp_path))
        assert await reloaded.query("posts") == [{"title": "Deux"}]
        assert (tmp_path / "posts.json").exists()
        assert not list(tmp_path.glob("*.tmp"))


class TestFactory:
    def test_memory(self):
        provider = create_local_storage("memory")
        assert isinstance(provider.metadata, InMemoryMetadataStorage)

    def test_file(self, tmp_path):
        provider = create_local_storage("file", str(tmp_path))
        assert isinstance(provider.metadata, JsonFileMetadataStorage)
        assert (tmp_path / "documents").is_dir()

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_local_storage("mongo")
