"""Inventory transfer — command and handler.

Moves stock from one warehouse to another while keeping both within
capacity. A transfer of the whole pile moves the item itself; a partial
transfer leaves the rest behind and either tops up the destination's item
with the same SKU or splits off a new one.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from warehousing.capacity import Occupancy
from warehousing.domain import warehousing
from warehousing.exceptions import InvalidArgument
from warehousing.item.item import InventoryItem
from warehousing.sku import derive_sku
from warehousing.warehouse.warehouse import Warehouse

logger = structlog.get_logger(__name__)


@warehousing.command(part_of="InventoryItem")
class TransferInventory:
    """Move ``quantity`` units of an item to another warehouse."""

    item_id = Identifier(required=True)
    source_warehouse_id = Identifier(required=True)
    destination_warehouse_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@warehousing.command_handler(part_of=InventoryItem)
class TransferHandler:
    @handle(TransferInventory)
    def transfer(self, command):
        """Apply the transfer and return the id of the item holding the moved stock."""
        items = current_domain.repository_for(InventoryItem)
        warehouses = current_domain.repository_for(Warehouse)
        source_id = str(command.source_warehouse_id)
        destination_id = str(command.destination_warehouse_id)

        item = items.find(command.item_id)

        if str(item.warehouse_id) != source_id:
            raise InvalidArgument("Item is not in the specified source warehouse")
        if source_id == destination_id:
            raise InvalidArgument("Source and destination warehouses must be different")
        if command.quantity > item.quantity:
            raise InvalidArgument(
                f"Transfer quantity ({command.quantity}) exceeds available quantity ({item.quantity})"
            )

        destination = warehouses.find(destination_id)
        destination.admit(command.quantity, Occupancy.measure(destination))
        warehouses.add(destination)

        if command.quantity == item.quantity:
            item.relocate(destination.id)
            items.add(item)
            result = item
        else:
            existing = items.find_by_sku(item.sku, warehouse_id=destination.id)
            if existing:
                result = existing[0]
                item.merge_into(result, command.quantity)
            else:
                sku = derive_sku(item.sku, lambda candidate: items.sku_taken(candidate, destination.id))
                result = item.split_off(command.quantity, destination.id, sku)
            items.add(item)
            items.add(result)

        logger.info(
            "Inventory transferred",
            item_id=str(item.id),
            destination_item_id=str(result.id),
            source_warehouse_id=source_id,
            destination_warehouse_id=destination_id,
            quantity=command.quantity,
            sku=result.sku,
        )
        return str(result.id)
