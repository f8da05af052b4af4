"""Capacity accounting for warehouses.

A warehouse stores only its maximum capacity. How much of it is used is
always measured from the live item rows, so the figures can never drift from
the stock they describe.
"""

from protean.fields import Integer, String
from protean.utils.globals import current_domain

from warehousing.domain import warehousing


@warehousing.value_object
class Occupancy:
    """How full a warehouse is at the moment it was measured."""

    warehouse_id = String(max_length=50)
    max_capacity = Integer(default=0)
    current = Integer(default=0)
    item_count = Integer(default=0)

    @property
    def available(self) -> int:
        return self.max_capacity - self.current

    @property
    def utilization(self) -> float:
        """Used share of capacity, in percent."""
        if not self.max_capacity:
            return 0.0
        return self.current / self.max_capacity * 100

    @classmethod
    def of(cls, warehouse, items) -> "Occupancy":
        """Occupancy of ``warehouse`` given the items it holds."""
        return cls(
            warehouse_id=str(warehouse.id),
            max_capacity=warehouse.max_capacity,
            current=sum(item.quantity or 0 for item in items),
            item_count=len(items),
        )

    @classmethod
    def measure(cls, warehouse) -> "Occupancy":
        """Measure ``warehouse`` against the items currently stored in it."""
        from warehousing.item.item import InventoryItem

        items = current_domain.repository_for(InventoryItem).find_by_warehouse(warehouse.id)
        return cls.of(warehouse, items)
