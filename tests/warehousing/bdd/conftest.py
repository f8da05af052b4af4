"""Shared BDD fixtures and step definitions for the Warehousing domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when
from warehousing import exceptions
from warehousing.capacity import Occupancy
from warehousing.item.item import InventoryItem
from warehousing.item.management import CreateInventoryItem
from warehousing.item.transfer import TransferInventory
from warehousing.warehouse.management import CreateWarehouse
from warehousing.warehouse.warehouse import Warehouse


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def warehouses():
    """Warehouse ids by name."""
    return {}


@pytest.fixture()
def items():
    """Item ids by (sku, warehouse name) as first stocked."""
    return {}


@pytest.fixture()
def outcome():
    """Container for the result or error of the When step."""
    return {"result": None, "exc": None}


def attempt(outcome, command):
    try:
        outcome["result"] = current_domain.process(command, asynchronous=False)
    except exceptions.WarehousingError as exc:
        outcome["exc"] = exc


def occupancy(warehouse_id):
    return Occupancy.measure(current_domain.repository_for(Warehouse).get(warehouse_id))


def transfer_command(items, warehouses, quantity, sku, source, destination):
    return TransferInventory(
        item_id=items[(sku, source)],
        source_warehouse_id=warehouses[source],
        destination_warehouse_id=warehouses[destination],
        quantity=quantity,
    )


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a warehouse "{name}" with capacity {capacity:d}'))
def warehouse_with_capacity(warehouses, name, capacity):
    warehouses[name] = current_domain.process(
        CreateWarehouse(name=name, location=f"{name} Street", max_capacity=capacity),
        asynchronous=False,
    )


@given(parsers.cfparse('an item "{sku}" with quantity {quantity:d} in "{warehouse}"'))
def stocked_item(warehouses, items, sku, quantity, warehouse):
    items[(sku, warehouse)] = current_domain.process(
        CreateInventoryItem(
            sku=sku,
            name=f"Item {sku}",
            category="General",
            quantity=quantity,
            warehouse_id=warehouses[warehouse],
        ),
        asynchronous=False,
    )


@given("SKUs are unique per warehouse")
def sku_unique_per_warehouse_step(monkeypatch):
    monkeypatch.setenv("SKU_UNIQUENESS", "warehouse")


@given(parsers.cfparse('{quantity:d} units of "{sku}" were transferred from "{source}" to "{destination}"'))
def earlier_transfer(warehouses, items, quantity, sku, source, destination):
    current_domain.process(
        transfer_command(items, warehouses, quantity, sku, source, destination),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('an item "{sku}" with quantity {quantity:d} is stocked in "{warehouse}"'))
def stock_item(warehouses, outcome, sku, quantity, warehouse):
    attempt(
        outcome,
        CreateInventoryItem(sku=sku, name=f"Item {sku}", quantity=quantity, warehouse_id=warehouses[warehouse]),
    )


@when(parsers.cfparse('{quantity:d} units of "{sku}" are transferred from "{source}" to "{destination}"'))
def transfer(warehouses, items, outcome, quantity, sku, source, destination):
    attempt(outcome, transfer_command(items, warehouses, quantity, sku, source, destination))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request succeeds")
def request_succeeds(outcome):
    assert outcome["exc"] is None
    assert outcome["result"] is not None


@then(parsers.cfparse("the request fails with {error_name}"))
def request_fails(outcome, error_name):
    assert isinstance(outcome["exc"], getattr(exceptions, error_name))


@then(parsers.cfparse('warehouse "{name}" has {available:d} units available'))
def units_available(warehouses, name, available):
    assert occupancy(warehouses[name]).available == available


@then(parsers.cfparse('warehouse "{name}" holds {current:d} units'))
def units_held(warehouses, name, current):
    assert occupancy(warehouses[name]).current == current


@then(parsers.cfparse('item "{sku}" holds {quantity:d} units in "{warehouse}"'))
def item_holds(warehouses, items, sku, quantity, warehouse):
    item = current_domain.repository_for(InventoryItem).get(items[(sku, warehouse)])
    assert item.quantity == quantity
    assert item.warehouse_id == warehouses[warehouse]
