import pytest

from app.core.exceptions import (
    NotFoundError,
    DanglingReferenceError,
    DependentsExistError,
    DuplicateIdentifierError,
    DuplicateKeyError,
)
from app.schemas.category_schema import CategoryCreate, CategoryUpdate
from app.schemas.brand_schema import BrandCreate, BrandUpdate
from app.schemas.product_schema import ProductCreate, ProductUpdate
from app.schemas.user_schema import UserCreate, UserUpdate
from app.services.product_service import DEFAULT_IMAGE


def hammer(**overrides):
    data = {"id": 1, "name": "Hammer", "price": 9.99, "category_id": 1, "brand_id": 1}
    data.update(overrides)
    return ProductCreate(**data)


class TestProductService:

    @pytest.mark.asyncio
    async def test_create_applies_defaults(self, catalog):
        product = await catalog.products.create(hammer())

        assert product["stock"] == 0
        assert product["active"] is True
        assert product["description"] == "Sin descripción"
        assert product["image"] == DEFAULT_IMAGE

    @pytest.mark.asyncio
    async def test_create_then_get_round_trip(self, catalog):
        created = await catalog.products.create(hammer(stock=4, description="Steel"))

        fetched = await catalog.products.get_by_id(created["id"])

        assert fetched == {
            "id": 1,
            "name": "Hammer",
            "description": "Steel",
            "price": 9.99,
            "stock": 4,
            "image": DEFAULT_IMAGE,
            "category_id": 1,
            "brand_id": 1,
            "active": True,
        }

    @pytest.mark.asyncio
    async def test_create_with_missing_category_persists_nothing(self, catalog):
        with pytest.raises(DanglingReferenceError) as exc_info:
            await catalog.products.create(hammer(category_id=5))

        assert exc_info.value.field == "categoryId"
        with pytest.raises(NotFoundError):
            await catalog.products.get_by_id(1)
        assert await catalog.products.get_all() == []

    @pytest.mark.asyncio
    async def test_create_with_missing_brand(self, catalog):
        with pytest.raises(DanglingReferenceError) as exc_info:
            await catalog.products.create(hammer(brand_id=2))

        assert exc_info.value.field == "brandId"

    @pytest.mark.asyncio
    async def test_create_duplicate_id(self, catalog):
        await catalog.products.create(hammer())

        with pytest.raises(DuplicateIdentifierError):
            await catalog.products.create(hammer(name="Other hammer"))

    @pytest.mark.asyncio
    async def test_update_with_missing_category_keeps_stored_value(self, catalog):
        await catalog.products.create(hammer())

        with pytest.raises(DanglingReferenceError) as exc_info:
            await catalog.products.update(1, ProductUpdate(category_id=999))

        assert exc_info.value.field == "categoryId"
        assert (await catalog.products.get_by_id(1))["category_id"] == 1

    @pytest.mark.asyncio
    async def test_partial_update_skips_untouched_references(self, catalog, store):
        await catalog.products.create(hammer())
        # Brand removed behind the service's back: a price-only edit must still work
        await store.brands.delete(1)

        updated = await catalog.products.update(1, ProductUpdate(price=12.5))

        assert updated["price"] == 12.5
        assert updated["brand_id"] == 1

    @pytest.mark.asyncio
    async def test_update_to_existing_references(self, catalog):
        await catalog.categories.create(CategoryCreate(id=2, name="Garden"))
        await catalog.products.create(hammer())

        updated = await catalog.products.update(1, ProductUpdate(category_id=2))

        assert updated["category_id"] == 2

    @pytest.mark.asyncio
    async def test_empty_update_is_idempotent(self, catalog):
        before = await catalog.products.create(hammer())

        after = await catalog.products.update(1, ProductUpdate())

        assert after == before

    @pytest.mark.asyncio
    async def test_explicit_null_means_unchanged(self, catalog):
        await catalog.products.create(hammer())

        updated = await catalog.products.update(1, ProductUpdate.model_validate({"name": None}))

        assert updated["name"] == "Hammer"

    @pytest.mark.asyncio
    async def test_update_missing_product(self, catalog):
        with pytest.raises(NotFoundError):
            await catalog.products.update(8, ProductUpdate(price=1))

    @pytest.mark.asyncio
    async def test_delete_missing_product(self, catalog):
        with pytest.raises(NotFoundError):
            await catalog.products.delete(8)


class TestCategoryAndBrandDeletion:

    @pytest.mark.asyncio
    async def test_full_scenario(self, catalog):
        product = await catalog.products.create(hammer())
        assert product["stock"] == 0
        assert product["active"] is True

        with pytest.raises(DependentsExistError) as exc_info:
            await catalog.categories.delete(1)
        assert exc_info.value.count == 1
        assert (await catalog.categories.get_by_id(1))["name"] == "Tools"

        await catalog.products.delete(1)
        deleted = await catalog.categories.delete(1)

        assert deleted["id"] == 1
        with pytest.raises(NotFoundError):
            await catalog.categories.get_by_id(1)

    @pytest.mark.asyncio
    async def test_brand_delete_blocked_by_products(self, catalog):
        await catalog.products.create(hammer())
        await catalog.products.create(hammer(id=2, name="Mallet"))

        with pytest.raises(DependentsExistError) as exc_info:
            await catalog.brands.delete(1)

        assert exc_info.value.count == 2
        assert await catalog.brands.get_by_id(1)

    @pytest.mark.asyncio
    async def test_delete_missing_category_is_not_found(self, catalog):
        with pytest.raises(NotFoundError):
            await catalog.categories.delete(77)

    @pytest.mark.asyncio
    async def test_category_defaults_and_update(self, services):
        created = await services.categories.create(CategoryCreate(name="Tools"))
        assert created == {"id": 1, "name": "Tools", "description": "Sin descripción", "active": True}

        updated = await services.categories.update(1, CategoryUpdate(active=False))
        assert updated["active"] is False
        assert updated["description"] == "Sin descripción"

    @pytest.mark.asyncio
    async def test_brand_defaults(self, services):
        created = await services.brands.create(BrandCreate(name="Acme"))

        assert created["country"] == "Desconocido"
        assert created["active"] is True

        updated = await services.brands.update(created["id"], BrandUpdate(country="Chile"))
        assert updated["country"] == "Chile"


class TestUserService:

    @pytest.mark.asyncio
    async def test_defaults_derived_from_name(self, services):
        user = await services.users.create(UserCreate(name="Ana López", password="secret"))

        assert user["username"] == "analópez"
        assert user["email"] == "analópez@example.com"
        assert user["avatar"].startswith("https://placehold.co/")

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected_by_store(self, services):
        await services.users.create(UserCreate(name="Ana", email="a@x.com", password="p"))

        with pytest.raises(DuplicateKeyError) as exc_info:
            await services.users.create(UserCreate(name="Otra", email="a@x.com", password="p"))

        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, services):
        user = await services.users.create(UserCreate(name="Ana", password="p"))

        updated = await services.users.update(user["id"], UserUpdate(avatar="https://img/ana.png"))
        assert updated["avatar"] == "https://img/ana.png"

        await services.users.delete(user["id"])
        with pytest.raises(NotFoundError):
            await services.users.get_by_id(user["id"])
