"""Repository for the InventoryItem aggregate."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.query import Q

from warehousing.config import SkuScope, sku_scope
from warehousing.domain import warehousing
from warehousing.exceptions import ResourceNotFound
from warehousing.item.item import InventoryItem
from warehousing.utils.query import exhaust


@warehousing.repository(part_of=InventoryItem)
class InventoryItemRepository:
    """Lookups by warehouse, SKU and free text on top of the standard CRUD."""

    def find(self, item_id) -> InventoryItem:
        """Load an item or raise ``ResourceNotFound``."""
        try:
            return self.get(str(item_id))
        except ObjectNotFoundError:
            raise ResourceNotFound(f"Inventory item not found with id: {item_id}") from None

    def all_items(self) -> list[InventoryItem]:
        return sorted(exhaust(self._dao.query), key=lambda i: (i.name.lower(), i.sku))

    def find_by_warehouse(self, warehouse_id) -> list[InventoryItem]:
        items = exhaust(self._dao.query.filter(warehouse_id=str(warehouse_id)))
        return sorted(items, key=lambda i: (i.name.lower(), i.sku))

    def find_by_sku(self, sku: str, warehouse_id=None) -> list[InventoryItem]:
        """Items stocked under exactly ``sku``, optionally in one warehouse."""
        criteria = {"sku": sku}
        if warehouse_id is not None:
            criteria["warehouse_id"] = str(warehouse_id)
        return exhaust(self._dao.query.filter(**criteria))

    def sku_taken(self, sku: str, warehouse_id, exclude_id=None) -> bool:
        """Whether ``sku`` is already used where it would have to be unique.

        With global uniqueness any warehouse counts; otherwise only
        ``warehouse_id``. ``exclude_id`` skips the item being edited.
        """
        scope_warehouse = warehouse_id if sku_scope() is SkuScope.WAREHOUSE else None
        return any(
            str(item.id) != str(exclude_id)
            for item in self.find_by_sku(sku, warehouse_id=scope_warehouse)
        )

    def search(self, term: str | None = None, warehouse_id=None) -> list[InventoryItem]:
        """Items whose name, SKU or category contains ``term``, ignoring case.

        A blank term matches everything; ``warehouse_id`` narrows the result
        to one warehouse.
        """
        query = self._dao.query
        if warehouse_id:
            query = query.filter(warehouse_id=str(warehouse_id))

        needle = (term or "").strip()
        if needle:
            criteria = Q(name__icontains=needle) | Q(sku__icontains=needle)
            # Categories are nullable, so they are matched by value rather than with icontains.
            categories = [c for c in self.distinct_categories() if needle.lower() in c.lower()]
            if categories:
                criteria |= Q(category__in=categories)
            query = query.filter(criteria)

        return sorted(exhaust(query), key=lambda i: (i.name.lower(), i.sku))

    def distinct_categories(self) -> list[str]:
        return sorted({item.category for item in exhaust(self._dao.query) if item.category and item.category.strip()})

    def remove(self, item: InventoryItem) -> None:
        self._dao.delete(item)
