"""Repository for the Warehouse aggregate."""

from protean.exceptions import ObjectNotFoundError

from warehousing.domain import warehousing
from warehousing.exceptions import ResourceNotFound
from warehousing.utils.query import exhaust
from warehousing.warehouse.warehouse import Warehouse


@warehousing.repository(part_of=Warehouse)
class WarehouseRepository:
    """Lookups the warehouse rules need on top of the standard CRUD."""

    def find(self, warehouse_id) -> Warehouse:
        """Load a warehouse or raise ``ResourceNotFound``."""
        try:
            return self.get(str(warehouse_id))
        except ObjectNotFoundError:
            raise ResourceNotFound(f"Warehouse not found with id: {warehouse_id}") from None

    def find_by_name(self, name: str) -> Warehouse | None:
        matches = self._dao.query.filter(name=name).all().items
        return matches[0] if matches else None

    def all_warehouses(self) -> list[Warehouse]:
        return sorted(exhaust(self._dao.query), key=lambda w: w.name.lower())

    def search_by_name(self, fragment: str) -> list[Warehouse]:
        """Warehouses whose name contains ``fragment``, ignoring case."""
        needle = (fragment or "").strip()
        if not needle:
            return self.all_warehouses()
        matches = exhaust(self._dao.query.filter(name__icontains=needle))
        return sorted(matches, key=lambda w: w.name.lower())

    def remove(self, warehouse: Warehouse) -> None:
        self._dao.delete(warehouse)
