"""Domain events for the InventoryItem aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from warehousing.domain import warehousing


@warehousing.event(part_of="InventoryItem")
class InventoryItemCreated:
    """A new item was stocked in a warehouse."""

    __version__ = 1

    item_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    sku = String(required=True)
    name = String(required=True)
    category = String()
    quantity = Integer(default=0)
    created_at = DateTime(required=True)


@warehousing.event(part_of="InventoryItem")
class InventoryItemUpdated:
    """Item details, quantity or warehouse were edited directly."""

    __version__ = 1

    item_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    previous_warehouse_id = Identifier(required=True)
    sku = String(required=True)
    name = String(required=True)
    description = Text()
    category = String()
    storage_location = String()
    previous_quantity = Integer(default=0)
    quantity = Integer(default=0)
    updated_at = DateTime(required=True)


@warehousing.event(part_of="InventoryItem")
class InventoryItemTransferred:
    """Stock moved from one warehouse to another.

    ``mode`` is Full (item reassigned in place), Merged (added to an existing
    item with the same SKU) or Split (a new item was created at the destination).
    """

    __version__ = 1

    item_id = Identifier(required=True)
    destination_item_id = Identifier(required=True)
    source_warehouse_id = Identifier(required=True)
    destination_warehouse_id = Identifier(required=True)
    sku = String(required=True)
    destination_sku = String(required=True)
    quantity = Integer(default=0)
    remaining_quantity = Integer(default=0)
    mode = String(required=True)
    transferred_at = DateTime(required=True)
