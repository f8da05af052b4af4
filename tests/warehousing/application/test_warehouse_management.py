"""Application tests for warehouse management commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from warehousing.exceptions import DuplicateResource, InvalidArgument, InvalidState, ResourceNotFound
from warehousing.item.management import CreateInventoryItem, DeleteInventoryItem
from warehousing.warehouse.management import CreateWarehouse, DeleteWarehouse, UpdateWarehouse
from warehousing.warehouse.warehouse import Warehouse


def _create_warehouse(**overrides):
    defaults = {"name": "Main Distribution Center", "location": "New York, NY", "max_capacity": 1000}
    defaults.update(overrides)
    return current_domain.process(CreateWarehouse(**defaults), asynchronous=False)


def _stock(warehouse_id, sku="LAPTOP-001", quantity=100):
    return current_domain.process(
        CreateInventoryItem(sku=sku, name="Laptop", quantity=quantity, warehouse_id=warehouse_id),
        asynchronous=False,
    )


def _update(warehouse_id, **overrides):
    defaults = {"name": "Main Distribution Center", "location": "New York, NY", "max_capacity": 1000}
    defaults.update(overrides)
    current_domain.process(UpdateWarehouse(warehouse_id=warehouse_id, **defaults), asynchronous=False)


class TestCreateWarehouse:
    def test_create_returns_id(self):
        assert _create_warehouse() is not None

    def test_create_persists(self):
        warehouse_id = _create_warehouse()
        warehouse = current_domain.repository_for(Warehouse).get(warehouse_id)
        assert warehouse.name == "Main Distribution Center"
        assert warehouse.max_capacity == 1000

    def test_duplicate_name_is_rejected(self):
        _create_warehouse()
        with pytest.raises(DuplicateResource) as exc:
            _create_warehouse(location="Elsewhere")
        assert "Main Distribution Center" in exc.value.message

    def test_zero_capacity_is_rejected(self):
        with pytest.raises(ValidationError):
            _create_warehouse(max_capacity=0)


class TestUpdateWarehouse:
    def test_update_replaces_fields(self):
        warehouse_id = _create_warehouse()
        _update(warehouse_id, name="Renamed", location="Boston, MA", max_capacity=2000)
        warehouse = current_domain.repository_for(Warehouse).get(warehouse_id)
        assert warehouse.name == "Renamed"
        assert warehouse.location == "Boston, MA"
        assert warehouse.max_capacity == 2000

    def test_keeping_own_name_is_allowed(self):
        warehouse_id = _create_warehouse()
        _update(warehouse_id, location="Newark, NJ")
        assert current_domain.repository_for(Warehouse).get(warehouse_id).location == "Newark, NJ"

    def test_renaming_onto_another_warehouse_is_rejected(self):
        _create_warehouse(name="West Coast Hub")
        warehouse_id = _create_warehouse()
        with pytest.raises(DuplicateResource):
            _update(warehouse_id, name="West Coast Hub")

    def test_shrinking_below_usage_is_rejected(self):
        warehouse_id = _create_warehouse()
        _stock(warehouse_id, quantity=600)
        with pytest.raises(InvalidArgument):
            _update(warehouse_id, max_capacity=599)
        assert current_domain.repository_for(Warehouse).get(warehouse_id).max_capacity == 1000

    def test_shrinking_to_usage_is_allowed(self):
        warehouse_id = _create_warehouse()
        _stock(warehouse_id, quantity=600)
        _update(warehouse_id, max_capacity=600)
        assert current_domain.repository_for(Warehouse).get(warehouse_id).max_capacity == 600

    def test_unknown_warehouse(self):
        with pytest.raises(ResourceNotFound):
            _update("missing")


class TestDeleteWarehouse:
    def test_empty_warehouse_is_deleted(self):
        warehouse_id = _create_warehouse()
        current_domain.process(DeleteWarehouse(warehouse_id=warehouse_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Warehouse).get(warehouse_id)

    def test_warehouse_with_items_is_kept(self):
        warehouse_id = _create_warehouse()
        _stock(warehouse_id, quantity=0)
        with pytest.raises(InvalidState):
            current_domain.process(DeleteWarehouse(warehouse_id=warehouse_id), asynchronous=False)
        assert current_domain.repository_for(Warehouse).get(warehouse_id) is not None

    def test_warehouse_can_be_deleted_once_emptied(self):
        warehouse_id = _create_warehouse()
        item_id = _stock(warehouse_id)
        current_domain.process(DeleteInventoryItem(item_id=item_id), asynchronous=False)
        current_domain.process(DeleteWarehouse(warehouse_id=warehouse_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Warehouse).get(warehouse_id)

    def test_unknown_warehouse(self):
        with pytest.raises(ResourceNotFound):
            current_domain.process(DeleteWarehouse(warehouse_id="missing"), asynchronous=False)
