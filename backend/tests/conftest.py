import pytest
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.crud.catalog_store import CatalogStore
from app.services.container import ServiceContainer


@pytest.fixture
def store():
    """Empty in-memory catalog."""
    return CatalogStore.in_memory()


@pytest.fixture
def services(store):
    return ServiceContainer(store)


@pytest.fixture
async def client(services):
    """Async test client wired to an in-memory store (lifespan is not run)."""
    original = getattr(app.state, "services", None)
    app.state.services = services

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.state.services = original


@pytest.fixture
async def catalog(services):
    """Category 1 'Tools' and Brand 1 'Acme', created through the services."""
    from app.schemas.category_schema import CategoryCreate
    from app.schemas.brand_schema import BrandCreate

    await services.categories.create(CategoryCreate(id=1, name="Tools"))
    await services.brands.create(BrandCreate(id=1, name="Acme"))
    return services
