"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
State tracks entity IDs returned by creation endpoints so follow-up
operations can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class WarehouseState:
    """Tracks a pair of warehouses and the items a simulated manager stocked."""

    source_warehouse_id: str | None = None
    destination_warehouse_id: str | None = None
    item_ids: list[str] = field(default_factory=list)
    moved_item_ids: list[str] = field(default_factory=list)
