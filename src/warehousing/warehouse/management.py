"""Warehouse management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from warehousing.capacity import Occupancy
from warehousing.domain import warehousing
from warehousing.exceptions import DuplicateResource
from warehousing.warehouse.warehouse import Warehouse

logger = structlog.get_logger(__name__)


@warehousing.command(part_of="Warehouse")
class CreateWarehouse:
    """Create a new, empty warehouse."""

    name = String(required=True, max_length=255)
    location = String(required=True, max_length=255)
    max_capacity = Integer(required=True, min_value=1)


@warehousing.command(part_of="Warehouse")
class UpdateWarehouse:
    """Replace a warehouse's name, location and capacity."""

    warehouse_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    location = String(required=True, max_length=255)
    max_capacity = Integer(required=True, min_value=1)


@warehousing.command(part_of="Warehouse")
class DeleteWarehouse:
    """Delete an empty warehouse."""

    warehouse_id = Identifier(required=True)


@warehousing.command_handler(part_of=Warehouse)
class WarehouseManagementHandler:
    @handle(CreateWarehouse)
    def create_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        if repo.find_by_name(command.name) is not None:
            raise DuplicateResource(f"Warehouse with name '{command.name}' already exists")

        warehouse = Warehouse.create(
            name=command.name,
            location=command.location,
            max_capacity=command.max_capacity,
        )
        repo.add(warehouse)
        logger.info("Warehouse created", warehouse_id=str(warehouse.id), name=warehouse.name)
        return str(warehouse.id)

    @handle(UpdateWarehouse)
    def update_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        warehouse = repo.find(command.warehouse_id)

        if command.name != warehouse.name:
            clash = repo.find_by_name(command.name)
            if clash is not None and str(clash.id) != str(warehouse.id):
                raise DuplicateResource(f"Warehouse with name '{command.name}' already exists")

        warehouse.update_details(
            name=command.name,
            location=command.location,
            max_capacity=command.max_capacity,
            occupancy=Occupancy.measure(warehouse),
        )
        repo.add(warehouse)
        logger.info("Warehouse updated", warehouse_id=str(warehouse.id), max_capacity=warehouse.max_capacity)
        return str(warehouse.id)

    @handle(DeleteWarehouse)
    def delete_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        warehouse = repo.find(command.warehouse_id)
        warehouse.ensure_empty(Occupancy.measure(warehouse))
        repo.remove(warehouse)
        logger.info("Warehouse deleted", warehouse_id=str(command.warehouse_id))
