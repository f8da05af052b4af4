"""InventoryItem aggregate (CQRS) — a stock pile of one SKU in one warehouse.

Every item belongs to exactly one warehouse. Items move between warehouses
in three ways, all driven by the transfer handler:

    relocate:    the whole pile moves; identity and SKU are kept
    merge_into:  part of the pile is added to the destination's item with
                 the same SKU
    split_off:   part of the pile becomes a new item at the destination
                 under a derived SKU
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from warehousing.domain import warehousing
from warehousing.exceptions import InvalidArgument
from warehousing.item.events import (
    InventoryItemCreated,
    InventoryItemTransferred,
    InventoryItemUpdated,
)


class TransferMode(Enum):
    FULL = "Full"
    MERGED = "Merged"
    SPLIT = "Split"


@warehousing.aggregate
class InventoryItem:
    """Stock of one SKU held in one warehouse."""

    sku = String(required=True, max_length=255)
    name = String(required=True, max_length=255)
    description = Text()
    category = String(max_length=100)
    quantity = Integer(default=0, min_value=0)
    storage_location = String(max_length=255)
    warehouse_id = Identifier(required=True)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def sku_must_not_be_blank(self):
        if self.sku is not None and not self.sku.strip():
            raise ValidationError({"sku": ["SKU is required"]})

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Item name is required"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        sku,
        name,
        warehouse_id,
        quantity=0,
        description=None,
        category=None,
        storage_location=None,
    ):
        """Stock a new item in a warehouse.

        Capacity and SKU uniqueness are checked by the caller, which can see
        the other items.
        """
        now = datetime.now(UTC)
        item = cls(
            sku=sku,
            name=name,
            description=description,
            category=category,
            quantity=quantity,
            storage_location=storage_location,
            warehouse_id=str(warehouse_id) if warehouse_id is not None else None,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            InventoryItemCreated(
                item_id=str(item.id),
                warehouse_id=str(warehouse_id),
                sku=sku,
                name=name,
                category=category,
                quantity=quantity,
                created_at=now,
            )
        )
        return item

    # -------------------------------------------------------------------
    # Direct edits
    # -------------------------------------------------------------------
    def update_details(
        self,
        sku,
        name,
        quantity,
        warehouse_id,
        description=None,
        category=None,
        storage_location=None,
    ):
        """Replace every editable field of the item."""
        previous_warehouse_id = str(self.warehouse_id)
        previous_quantity = self.quantity

        self.sku = sku
        self.name = name
        self.description = description
        self.category = category
        self.quantity = quantity
        self.storage_location = storage_location
        self.warehouse_id = str(warehouse_id) if warehouse_id is not None else None
        self.updated_at = datetime.now(UTC)

        self.raise_(
            InventoryItemUpdated(
                item_id=str(self.id),
                warehouse_id=str(self.warehouse_id),
                previous_warehouse_id=previous_warehouse_id,
                sku=self.sku,
                name=self.name,
                description=self.description,
                category=self.category,
                storage_location=self.storage_location,
                previous_quantity=previous_quantity,
                quantity=self.quantity,
                updated_at=self.updated_at,
            )
        )

    def capacity_needed_for(self, quantity, warehouse_id):
        """Extra room an edit to ``quantity`` in ``warehouse_id`` would consume.

        Moving to another warehouse needs room for the whole new quantity;
        staying put needs room only for the increase.
        """
        if str(warehouse_id) != str(self.warehouse_id):
            return quantity
        return max(quantity - self.quantity, 0)

    # -------------------------------------------------------------------
    # Transfers
    # -------------------------------------------------------------------
    def relocate(self, destination_warehouse_id):
        """Move the whole pile to another warehouse, in place."""
        source_warehouse_id = str(self.warehouse_id)
        self.warehouse_id = str(destination_warehouse_id)
        self.updated_at = datetime.now(UTC)
        self._record_transfer(
            destination=self,
            source_warehouse_id=source_warehouse_id,
            quantity=self.quantity,
            mode=TransferMode.FULL,
        )

    def merge_into(self, existing, quantity):
        """Move part of the pile onto ``existing``, an item with the same SKU."""
        self._withdraw(quantity)
        existing.quantity = existing.quantity + quantity
        existing.updated_at = self.updated_at
        self._record_transfer(
            destination=existing,
            source_warehouse_id=str(self.warehouse_id),
            quantity=quantity,
            mode=TransferMode.MERGED,
        )

    def split_off(self, quantity, destination_warehouse_id, sku):
        """Move part of the pile into a new item at the destination.

        The new item copies name, description, category and storage location
        and is stocked under ``sku``.
        """
        self._withdraw(quantity)
        split = InventoryItem.create(
            sku=sku,
            name=self.name,
            warehouse_id=destination_warehouse_id,
            quantity=quantity,
            description=self.description,
            category=self.category,
            storage_location=self.storage_location,
        )
        self._record_transfer(
            destination=split,
            source_warehouse_id=str(self.warehouse_id),
            quantity=quantity,
            mode=TransferMode.SPLIT,
        )
        return split

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _withdraw(self, quantity):
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > self.quantity:
            raise InvalidArgument(
                f"Transfer quantity ({quantity}) exceeds available quantity ({self.quantity})"
            )
        self.quantity = self.quantity - quantity
        self.updated_at = datetime.now(UTC)

    def _record_transfer(self, destination, source_warehouse_id, quantity, mode):
        self.raise_(
            InventoryItemTransferred(
                item_id=str(self.id),
                destination_item_id=str(destination.id),
                source_warehouse_id=source_warehouse_id,
                destination_warehouse_id=str(destination.warehouse_id),
                sku=self.sku,
                destination_sku=destination.sku,
                quantity=quantity,
                remaining_quantity=0 if mode is TransferMode.FULL else self.quantity,
                mode=mode.value,
                transferred_at=self.updated_at,
            )
        )
