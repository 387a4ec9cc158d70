import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.stock_registry import StockRegistry
from app.services.stock_service import StockService
from app.services.storage_service import StorageService


@pytest.fixture
def registry():
    return StockRegistry()


@pytest.fixture
def stationery(registry):
    """Registry holding a pen and a ruler under Stationery, plus an empty Tools type."""
    registry.add_stock("Stationery", "PEN01", 10, "Blue pen")
    registry.add_stock("Stationery", "RUL01", 3, "Steel ruler", minimum=1)
    registry.add_stock_type("Tools")
    return registry


@pytest.fixture
def storage(tmp_path):
    return StorageService(tmp_path / "saved_stocks.txt", tmp_path / "saved_stocktypes.txt")


@pytest.fixture
def service(stationery, storage):
    return StockService(stationery, storage)


@pytest.fixture
def client(stationery, storage):
    """Client against the app with the registry injected directly (lifespan not run)."""
    app.state.registry = stationery
    app.state.storage = storage
    yield TestClient(app)
    del app.state.registry
    del app.state.storage
