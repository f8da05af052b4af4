"""Inventory item management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from warehousing.capacity import Occupancy
from warehousing.domain import warehousing
from warehousing.exceptions import DuplicateResource
from warehousing.item.item import InventoryItem
from warehousing.warehouse.warehouse import Warehouse

logger = structlog.get_logger(__name__)


@warehousing.command(part_of="InventoryItem")
class CreateInventoryItem:
    """Stock a new item in a warehouse."""

    sku = String(required=True, max_length=100)
    name = String(required=True, max_length=255)
    description = Text()
    category = String(max_length=100)
    # Integer(required=True) rejects 0, so quantities default instead
    quantity = Integer(default=0, min_value=0)
    storage_location = String(max_length=255)
    warehouse_id = Identifier(required=True)


@warehousing.command(part_of="InventoryItem")
class UpdateInventoryItem:
    """Replace every editable field of an item."""

    item_id = Identifier(required=True)
    sku = String(required=True, max_length=100)
    name = String(required=True, max_length=255)
    description = Text()
    category = String(max_length=100)
    quantity = Integer(default=0, min_value=0)
    storage_location = String(max_length=255)
    warehouse_id = Identifier(required=True)


@warehousing.command(part_of="InventoryItem")
class DeleteInventoryItem:
    """Remove an item and the stock it represents."""

    item_id = Identifier(required=True)


@warehousing.command_handler(part_of=InventoryItem)
class InventoryItemManagementHandler:
    @handle(CreateInventoryItem)
    def create_item(self, command):
        items = current_domain.repository_for(InventoryItem)
        warehouses = current_domain.repository_for(Warehouse)
        quantity = command.quantity or 0

        if items.sku_taken(command.sku, command.warehouse_id):
            raise DuplicateResource(f"Item with SKU '{command.sku}' already exists")

        warehouse = warehouses.find(command.warehouse_id)
        warehouse.admit(quantity, Occupancy.measure(warehouse))

        item = InventoryItem.create(
            sku=command.sku,
            name=command.name,
            warehouse_id=warehouse.id,
            quantity=quantity,
            description=command.description,
            category=command.category,
            storage_location=command.storage_location,
        )
        items.add(item)
        warehouses.add(warehouse)

        logger.info(
            "Inventory item created",
            item_id=str(item.id),
            sku=item.sku,
            warehouse_id=str(warehouse.id),
            quantity=quantity,
        )
        return str(item.id)

    @handle(UpdateInventoryItem)
    def update_item(self, command):
        items = current_domain.repository_for(InventoryItem)
        warehouses = current_domain.repository_for(Warehouse)
        quantity = command.quantity or 0

        item = items.find(command.item_id)

        if items.sku_taken(command.sku, command.warehouse_id, exclude_id=item.id):
            raise DuplicateResource(f"Item with SKU '{command.sku}' already exists")

        target = warehouses.find(command.warehouse_id)
        needed = item.capacity_needed_for(quantity, target.id)
        if needed > 0:
            target.admit(needed, Occupancy.measure(target))
            warehouses.add(target)

        item.update_details(
            sku=command.sku,
            name=command.name,
            quantity=quantity,
            warehouse_id=target.id,
            description=command.description,
            category=command.category,
            storage_location=command.storage_location,
        )
        items.add(item)

        logger.info(
            "Inventory item updated",
            item_id=str(item.id),
            sku=item.sku,
            warehouse_id=str(target.id),
            quantity=quantity,
        )
        return str(item.id)

    @handle(DeleteInventoryItem)
    def delete_item(self, command):
        items = current_domain.repository_for(InventoryItem)
        item = items.find(command.item_id)
        items.remove(item)
        logger.info("Inventory item deleted", item_id=str(command.item_id), sku=item.sku)
