"""Warehouse aggregate (CQRS) — a physical location with a fixed capacity.

A warehouse owns the inventory items stored in it. The ownership is held on
the item side (every item carries exactly one ``warehouse_id``), and the
warehouse guards it: it admits new stock only while there is room, and it
refuses to be deleted while it still holds items.

Usage figures are never stored on the warehouse. Callers measure them from
the live item rows (see ``warehousing.capacity.Occupancy``) and hand them in.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from warehousing.domain import warehousing
from warehousing.exceptions import InsufficientCapacity, InvalidArgument, InvalidState
from warehousing.warehouse.events import WarehouseCreated, WarehouseUpdated


@warehousing.aggregate
class Warehouse:
    """A physical location where inventory is stored."""

    name = String(required=True, max_length=255)
    location = String(required=True, max_length=255)
    max_capacity = Integer(required=True, min_value=1)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Warehouse name is required"]})

    @invariant.post
    def location_must_not_be_blank(self):
        if self.location is not None and not self.location.strip():
            raise ValidationError({"location": ["Location is required"]})

    @classmethod
    def create(cls, name, location, max_capacity):
        """Create a new, empty warehouse."""
        now = datetime.now(UTC)
        warehouse = cls(
            name=name,
            location=location,
            max_capacity=max_capacity,
            created_at=now,
            updated_at=now,
        )
        warehouse.raise_(
            WarehouseCreated(
                warehouse_id=str(warehouse.id),
                name=name,
                location=location,
                max_capacity=max_capacity,
                created_at=now,
            )
        )
        return warehouse

    def update_details(self, name, location, max_capacity, occupancy):
        """Replace name, location and capacity.

        Capacity may not drop below what the warehouse currently holds.
        """
        if max_capacity is not None and max_capacity < occupancy.current:
            raise InvalidArgument(
                f"Cannot reduce capacity to {max_capacity}. Current usage is {occupancy.current} items."
            )

        self.name = name
        self.location = location
        self.max_capacity = max_capacity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            WarehouseUpdated(
                warehouse_id=str(self.id),
                name=self.name,
                location=self.location,
                max_capacity=self.max_capacity,
                updated_at=self.updated_at,
            )
        )

    def admit(self, quantity, occupancy):
        """Claim room for ``quantity`` more units.

        Stamps the warehouse so it is rewritten in the same unit of work as
        the stock that consumes the room; two concurrent admissions then
        collide on the aggregate version instead of both committing.
        """
        if quantity > occupancy.available:
            raise InsufficientCapacity(
                f"Insufficient capacity in warehouse '{self.name}'. "
                f"Available: {occupancy.available}, Required: {quantity}"
            )
        self.updated_at = datetime.now(UTC)

    def ensure_empty(self, occupancy):
        """Refuse removal while any item still lives here."""
        if occupancy.item_count > 0:
            raise InvalidState(
                f"Cannot delete warehouse. It contains {occupancy.item_count} items. "
                "Please remove or transfer all items before deleting."
            )
