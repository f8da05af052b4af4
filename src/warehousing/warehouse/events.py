"""Domain events for the Warehouse aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from warehousing.domain import warehousing


@warehousing.event(part_of="Warehouse")
class WarehouseCreated:
    """A new warehouse was created."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    name = String(required=True)
    location = String(required=True)
    max_capacity = Integer(required=True)
    created_at = DateTime(required=True)


@warehousing.event(part_of="Warehouse")
class WarehouseUpdated:
    """Warehouse name, location or capacity changed."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    name = String(required=True)
    location = String(required=True)
    max_capacity = Integer(required=True)
    updated_at = DateTime(required=True)
