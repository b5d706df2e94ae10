import pytest

from app.db.seed import seed_store


class TestSeed:

    @pytest.mark.asyncio
    async def test_generates_consistent_catalog(self, store):
        assert await seed_store(store, seed=1) is True

        categories = {c["id"] for c in await store.categories.list()}
        brands = {b["id"] for b in await store.brands.list()}
        products = await store.products.list()

        assert len(categories) == 10
        assert len(brands) == 10
        assert len(products) == 100
        assert await store.users.count() == 100
        for product in products:
            assert product["category_id"] in categories
            assert product["brand_id"] in brands
            assert product["price"] >= 0

    @pytest.mark.asyncio
    async def test_same_seed_same_data(self, store):
        from app.crud.catalog_store import CatalogStore

        other = CatalogStore.in_memory()
        await seed_store(store, seed=3)
        await seed_store(other, seed=3)

        assert await store.products.list() == await other.products.list()

    @pytest.mark.asyncio
    async def test_skips_non_empty_store(self, store):
        await store.categories.insert({"id": 1, "name": "Tools"})

        assert await seed_store(store) is False
        assert await store.products.count() == 0
