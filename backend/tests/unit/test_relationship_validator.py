import pytest

from app.core.exceptions import DanglingReferenceError, DependentsExistError
from app.services.relationship_validator import RelationshipValidator


@pytest.fixture
async def validator(store):
    await store.categories.insert({"id": 1, "name": "Tools"})
    await store.brands.insert({"id": 1, "name": "Acme"})
    return RelationshipValidator(store)


class TestProductReferences:

    @pytest.mark.asyncio
    async def test_existing_references_pass(self, validator):
        await validator.validate_product_references(category_id=1, brand_id=1)

    @pytest.mark.asyncio
    async def test_missing_category(self, validator):
        with pytest.raises(DanglingReferenceError) as exc_info:
            await validator.validate_product_references(category_id=5, brand_id=1)

        assert exc_info.value.field == "categoryId"
        assert exc_info.value.value == 5

    @pytest.mark.asyncio
    async def test_missing_brand(self, validator):
        with pytest.raises(DanglingReferenceError) as exc_info:
            await validator.validate_product_references(category_id=1, brand_id=9)

        assert exc_info.value.field == "brandId"

    @pytest.mark.asyncio
    async def test_category_reported_before_brand(self, validator):
        with pytest.raises(DanglingReferenceError) as exc_info:
            await validator.validate_product_references(category_id=5, brand_id=9)

        assert exc_info.value.field == "categoryId"

    @pytest.mark.asyncio
    async def test_absent_fields_are_not_checked(self, validator):
        await validator.validate_product_references(category_id=None, brand_id=1)
        await validator.validate_product_references()


class TestNoDependents:

    @pytest.mark.asyncio
    async def test_unreferenced_category_passes(self, validator):
        await validator.validate_no_dependents("category", 1)

    @pytest.mark.asyncio
    async def test_counts_referencing_products(self, store, validator):
        for product_id in (1, 2):
            await store.products.insert({"id": product_id, "category_id": 1, "brand_id": 1})

        with pytest.raises(DependentsExistError) as exc_info:
            await validator.validate_no_dependents("category", 1)

        assert exc_info.value.count == 2
        assert exc_info.value.to_dict()["count"] == 2

    @pytest.mark.asyncio
    async def test_brand_uses_brand_field(self, store, validator):
        await store.brands.insert({"id": 2, "name": "Other"})
        await store.products.insert({"id": 1, "category_id": 2, "brand_id": 1})

        await validator.validate_no_dependents("brand", 2)
        with pytest.raises(DependentsExistError) as exc_info:
            await validator.validate_no_dependents("brand", 1)
        assert exc_info.value.count == 1
