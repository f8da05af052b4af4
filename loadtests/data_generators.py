"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's Pydantic request
schemas. Names and SKUs carry a random suffix so concurrent users do not
collide on the uniqueness rules.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Electronics", "Furniture", "Accessories", "Office Supplies"]


def warehouse_data(max_capacity: int | None = None) -> dict:
    """Generate a WarehouseRequest payload with a unique name."""
    return {
        "name": f"{fake.city()} Depot {uuid.uuid4().hex[:8]}",
        "location": f"{fake.city()}, {fake.state_abbr()}",
        "max_capacity": max_capacity or random.randint(500, 5000),
    }


def unique_sku(prefix: str = "LT") -> str:
    """Generate SKUs like 'LT-A1B2C3D4'."""
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


def item_data(warehouse_id: str, quantity: int | None = None) -> dict:
    """Generate an InventoryItemRequest payload."""
    return {
        "sku": unique_sku(),
        "name": fake.catch_phrase()[:255],
        "description": fake.sentence(),
        "category": random.choice(CATEGORIES),
        "quantity": quantity if quantity is not None else random.randint(1, 50),
        "storage_location": f"{random.choice('ABCD')}{random.randint(1, 9)}-R{random.randint(1, 5)}-S{random.randint(1, 5)}",
        "warehouse_id": warehouse_id,
    }


def transfer_data(item_id: str, source: str, destination: str, quantity: int) -> dict:
    return {
        "item_id": item_id,
        "source_warehouse_id": source,
        "destination_warehouse_id": destination,
        "quantity": quantity,
    }
