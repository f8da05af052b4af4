import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from warehousing.api import dashboard_router, item_router, register_error_handlers, warehouse_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(warehouse_router, prefix="/api")
    app.include_router(item_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def create_warehouse(client):
    def _create(**overrides):
        defaults = {"name": "Main Distribution Center", "location": "New York, NY", "max_capacity": 100}
        defaults.update(overrides)
        response = client.post("/api/warehouses", json=defaults)
        assert response.status_code == 201
        return response.json()

    return _create


@pytest.fixture()
def create_item(client):
    def _create(warehouse_id, **overrides):
        defaults = {
            "sku": "LAPTOP-001",
            "name": "Dell Latitude 5520",
            "description": "15-inch business laptop",
            "category": "Electronics",
            "quantity": 60,
            "storage_location": "A1-R1-S3",
            "warehouse_id": warehouse_id,
        }
        defaults.update(overrides)
        response = client.post("/api/items", json=defaults)
        assert response.status_code == 201
        return response.json()

    return _create
