"""Pydantic request/response schemas for the Warehousing API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Warehouse Schemas ---


class WarehouseRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Main Distribution Center",
                    "location": "New York, NY",
                    "max_capacity": 10000,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    max_capacity: int = Field(..., ge=1)


class WarehouseResponse(BaseModel):
    id: str
    name: str
    location: str
    max_capacity: int
    current_capacity: int
    available_capacity: int
    utilization_percentage: float
    item_count: int


# --- Inventory Item Schemas ---


class InventoryItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "sku": "LAPTOP-001",
                    "name": "Dell Latitude 5520",
                    "description": "15-inch business laptop",
                    "category": "Electronics",
                    "quantity": 150,
                    "storage_location": "A1-R1-S3",
                    "warehouse_id": "6f1c7e0a-3d8b-4a55-9a43-0d2f0c7d9b11",
                }
            ]
        }
    }

    sku: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(None, max_length=100)
    quantity: int = Field(..., ge=0)
    storage_location: str | None = Field(None, max_length=255)
    warehouse_id: str = Field(..., min_length=1)


class InventoryItemResponse(BaseModel):
    id: str
    sku: str
    name: str
    description: str | None = None
    category: str | None = None
    quantity: int
    storage_location: str | None = None
    warehouse_id: str
    warehouse_name: str | None = None


class TransferRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "item_id": "0b5c2f3e-8a41-4c4f-b5e7-6c1d2a9f8e70",
                    "source_warehouse_id": "6f1c7e0a-3d8b-4a55-9a43-0d2f0c7d9b11",
                    "destination_warehouse_id": "c2e9d4b7-51a0-4f3c-8d6e-2b7a9f0e1c34",
                    "quantity": 25,
                }
            ]
        }
    }

    item_id: str = Field(..., min_length=1)
    source_warehouse_id: str = Field(..., min_length=1)
    destination_warehouse_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


# --- Dashboard ---


class DashboardResponse(BaseModel):
    total_warehouses: int
    total_items: int
    total_quantity: int
    total_capacity: int
    used_capacity: int
    utilization_percentage: float
    near_capacity_threshold: float
    near_capacity_warehouses: list[WarehouseResponse] = []
    quantity_by_category: dict[str, int] = {}
