"""FastAPI endpoints for the Warehousing domain."""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from warehousing import queries
from warehousing.api.schemas import (
    DashboardResponse,
    InventoryItemRequest,
    InventoryItemResponse,
    TransferRequest,
    WarehouseRequest,
    WarehouseResponse,
)
from warehousing.item.management import (
    CreateInventoryItem,
    DeleteInventoryItem,
    UpdateInventoryItem,
)
from warehousing.item.transfer import TransferInventory
from warehousing.warehouse.management import (
    CreateWarehouse,
    DeleteWarehouse,
    UpdateWarehouse,
)

warehouse_router = APIRouter(prefix="/warehouses", tags=["warehouses"])
item_router = APIRouter(prefix="/items", tags=["items"])
dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


# --- Warehouse endpoints ---


@warehouse_router.get("", response_model=list[WarehouseResponse])
async def list_warehouses() -> list[dict]:
    return queries.list_warehouses()


@warehouse_router.get("/search", response_model=list[WarehouseResponse])
async def search_warehouses(name: str = "") -> list[dict]:
    return queries.search_warehouses(name)


@warehouse_router.get("/{warehouse_id}", response_model=WarehouseResponse)
async def get_warehouse(warehouse_id: str) -> dict:
    return queries.warehouse_summary(warehouse_id)


@warehouse_router.post("", status_code=201, response_model=WarehouseResponse)
async def create_warehouse(body: WarehouseRequest) -> dict:
    command = CreateWarehouse(
        name=body.name,
        location=body.location,
        max_capacity=body.max_capacity,
    )
    warehouse_id = current_domain.process(command, asynchronous=False)
    return queries.warehouse_summary(warehouse_id)


@warehouse_router.put("/{warehouse_id}", response_model=WarehouseResponse)
async def update_warehouse(warehouse_id: str, body: WarehouseRequest) -> dict:
    command = UpdateWarehouse(
        warehouse_id=warehouse_id,
        name=body.name,
        location=body.location,
        max_capacity=body.max_capacity,
    )
    current_domain.process(command, asynchronous=False)
    return queries.warehouse_summary(warehouse_id)


@warehouse_router.delete("/{warehouse_id}", status_code=204)
async def delete_warehouse(warehouse_id: str) -> Response:
    current_domain.process(DeleteWarehouse(warehouse_id=warehouse_id), asynchronous=False)
    return Response(status_code=204)


# --- Inventory item endpoints ---
# Fixed paths are declared before /{item_id} so they are not captured as ids.


@item_router.get("", response_model=list[InventoryItemResponse])
async def list_items() -> list[dict]:
    return queries.list_items()


@item_router.get("/search", response_model=list[InventoryItemResponse])
async def search_items(search_term: str | None = None, warehouse_id: str | None = None) -> list[dict]:
    return queries.search_items(search_term, warehouse_id)


@item_router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    return queries.distinct_categories()


@item_router.get("/warehouse/{warehouse_id}", response_model=list[InventoryItemResponse])
async def list_items_in_warehouse(warehouse_id: str) -> list[dict]:
    return queries.items_in_warehouse(warehouse_id)


@item_router.post("/transfer", response_model=InventoryItemResponse)
async def transfer_inventory(body: TransferRequest) -> dict:
    command = TransferInventory(
        item_id=body.item_id,
        source_warehouse_id=body.source_warehouse_id,
        destination_warehouse_id=body.destination_warehouse_id,
        quantity=body.quantity,
    )
    item_id = current_domain.process(command, asynchronous=False)
    return queries.get_item(item_id)


@item_router.get("/{item_id}", response_model=InventoryItemResponse)
async def get_item(item_id: str) -> dict:
    return queries.get_item(item_id)


@item_router.post("", status_code=201, response_model=InventoryItemResponse)
async def create_item(body: InventoryItemRequest) -> dict:
    command = CreateInventoryItem(
        sku=body.sku,
        name=body.name,
        description=body.description,
        category=body.category,
        quantity=body.quantity,
        storage_location=body.storage_location,
        warehouse_id=body.warehouse_id,
    )
    item_id = current_domain.process(command, asynchronous=False)
    return queries.get_item(item_id)


@item_router.put("/{item_id}", response_model=InventoryItemResponse)
async def update_item(item_id: str, body: InventoryItemRequest) -> dict:
    command = UpdateInventoryItem(
        item_id=item_id,
        sku=body.sku,
        name=body.name,
        description=body.description,
        category=body.category,
        quantity=body.quantity,
        storage_location=body.storage_location,
        warehouse_id=body.warehouse_id,
    )
    current_domain.process(command, asynchronous=False)
    return queries.get_item(item_id)


@item_router.delete("/{item_id}", status_code=204)
async def delete_item(item_id: str) -> Response:
    current_domain.process(DeleteInventoryItem(item_id=item_id), asynchronous=False)
    return Response(status_code=204)


# --- Dashboard ---


@dashboard_router.get("", response_model=DashboardResponse)
async def get_dashboard() -> dict:
    return queries.dashboard()
