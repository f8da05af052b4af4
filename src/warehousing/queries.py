"""Read side of the warehousing domain.

Plain functions that load aggregates through their repositories and shape
them into the dictionaries the API returns. Capacity figures are measured
from the live item rows on every call; nothing here writes.
"""

from collections import defaultdict

from protean.utils.globals import current_domain

from warehousing.capacity import Occupancy
from warehousing.config import near_capacity_threshold
from warehousing.item.item import InventoryItem
from warehousing.warehouse.warehouse import Warehouse

UNCATEGORIZED = "Uncategorized"


def _warehouses():
    return current_domain.repository_for(Warehouse)


def _items():
    return current_domain.repository_for(InventoryItem)


def _warehouse_view(warehouse, occupancy) -> dict:
    return {
        "id": str(warehouse.id),
        "name": warehouse.name,
        "location": warehouse.location,
        "max_capacity": warehouse.max_capacity,
        "current_capacity": occupancy.current,
        "available_capacity": occupancy.available,
        "utilization_percentage": occupancy.utilization,
        "item_count": occupancy.item_count,
    }


def _item_view(item, warehouse_names) -> dict:
    return {
        "id": str(item.id),
        "sku": item.sku,
        "name": item.name,
        "description": item.description,
        "category": item.category,
        "quantity": item.quantity,
        "storage_location": item.storage_location,
        "warehouse_id": str(item.warehouse_id),
        "warehouse_name": warehouse_names.get(str(item.warehouse_id)),
    }


def _summarize(warehouses) -> list[dict]:
    stock = defaultdict(list)
    for item in _items().all_items():
        stock[str(item.warehouse_id)].append(item)
    return [_warehouse_view(w, Occupancy.of(w, stock[str(w.id)])) for w in warehouses]


def _names() -> dict[str, str]:
    return {str(w.id): w.name for w in _warehouses().all_warehouses()}


# --- Warehouses ---


def warehouse_summary(warehouse_id) -> dict:
    """One warehouse with its capacity figures; ``ResourceNotFound`` if unknown."""
    warehouse = _warehouses().find(warehouse_id)
    return _warehouse_view(warehouse, Occupancy.measure(warehouse))


def list_warehouses() -> list[dict]:
    return _summarize(_warehouses().all_warehouses())


def search_warehouses(name: str | None) -> list[dict]:
    return _summarize(_warehouses().search_by_name(name))


# --- Items ---


def get_item(item_id) -> dict:
    item = _items().find(item_id)
    return _item_view(item, _names())


def list_items() -> list[dict]:
    names = _names()
    return [_item_view(item, names) for item in _items().all_items()]


def items_in_warehouse(warehouse_id) -> list[dict]:
    """Items stored in one warehouse; an unknown id simply has none."""
    names = _names()
    return [_item_view(item, names) for item in _items().find_by_warehouse(warehouse_id)]


def search_items(term: str | None = None, warehouse_id: str | None = None) -> list[dict]:
    names = _names()
    return [_item_view(item, names) for item in _items().search(term, warehouse_id or None)]


def distinct_categories() -> list[str]:
    return _items().distinct_categories()


# --- Dashboard ---


def dashboard() -> dict:
    """Totals across every warehouse, for the overview screen."""
    warehouses = list_warehouses()
    items = _items().all_items()
    threshold = near_capacity_threshold()

    total_capacity = sum(w["max_capacity"] for w in warehouses)
    used_capacity = sum(w["current_capacity"] for w in warehouses)

    by_category = defaultdict(int)
    for item in items:
        category = item.category if item.category and item.category.strip() else UNCATEGORIZED
        by_category[category] += item.quantity or 0

    return {
        "total_warehouses": len(warehouses),
        "total_items": len(items),
        "total_quantity": sum(item.quantity or 0 for item in items),
        "total_capacity": total_capacity,
        "used_capacity": used_capacity,
        "utilization_percentage": used_capacity / total_capacity * 100 if total_capacity else 0.0,
        "near_capacity_threshold": threshold,
        "near_capacity_warehouses": [w for w in warehouses if w["utilization_percentage"] > threshold],
        "quantity_by_category": dict(sorted(by_category.items())),
    }
