"""Tests for the read-side query functions."""

import pytest
from protean import current_domain
from warehousing import queries
from warehousing.exceptions import ResourceNotFound
from warehousing.item.management import CreateInventoryItem
from warehousing.warehouse.management import CreateWarehouse


def _create_warehouse(name, max_capacity=1000, location="New York, NY"):
    return current_domain.process(
        CreateWarehouse(name=name, location=location, max_capacity=max_capacity),
        asynchronous=False,
    )


def _create_item(warehouse_id, sku, name, category=None, quantity=10):
    return current_domain.process(
        CreateInventoryItem(sku=sku, name=name, category=category, quantity=quantity, warehouse_id=warehouse_id),
        asynchronous=False,
    )


@pytest.fixture()
def stocked():
    main = _create_warehouse("Main Distribution Center", max_capacity=1000)
    west = _create_warehouse("West Coast Hub", max_capacity=100, location="Los Angeles, CA")
    _create_item(main, "LAPTOP-001", "Dell Latitude", "Electronics", 150)
    _create_item(main, "DESK-001", "Standing Desk", "Furniture", 50)
    _create_item(west, "MOUSE-001", "Wireless Mouse", "Electronics", 85)
    _create_item(west, "MISC-001", "Gift Card", None, 0)
    return {"main": main, "west": west}


class TestWarehouseQueries:
    def test_summary_derives_capacity(self, stocked):
        summary = queries.warehouse_summary(stocked["main"])
        assert summary["current_capacity"] == 200
        assert summary["available_capacity"] == 800
        assert summary["utilization_percentage"] == 20.0
        assert summary["item_count"] == 2

    def test_summary_for_empty_warehouse(self):
        warehouse_id = _create_warehouse("Empty")
        summary = queries.warehouse_summary(warehouse_id)
        assert summary["current_capacity"] == 0
        assert summary["available_capacity"] == 1000
        assert summary["utilization_percentage"] == 0.0
        assert summary["item_count"] == 0

    def test_summary_for_unknown_warehouse(self):
        with pytest.raises(ResourceNotFound):
            queries.warehouse_summary("missing")

    def test_list_includes_every_warehouse(self, stocked):
        names = [w["name"] for w in queries.list_warehouses()]
        assert names == ["Main Distribution Center", "West Coast Hub"]

    def test_search_is_case_insensitive_substring(self, stocked):
        results = queries.search_warehouses("coast")
        assert [w["name"] for w in results] == ["West Coast Hub"]
        assert results[0]["current_capacity"] == 85

    def test_blank_search_matches_all(self, stocked):
        assert len(queries.search_warehouses("")) == 2
        assert len(queries.search_warehouses(None)) == 2

    def test_search_matches_inside_the_name(self, stocked):
        results = queries.search_warehouses("DISTRIBUTION")
        assert [w["name"] for w in results] == ["Main Distribution Center"]


class TestItemQueries:
    def test_get_item_includes_warehouse_name(self, stocked):
        item_id = queries.items_in_warehouse(stocked["west"])[0]["id"]
        item = queries.get_item(item_id)
        assert item["warehouse_name"] == "West Coast Hub"

    def test_get_unknown_item(self):
        with pytest.raises(ResourceNotFound):
            queries.get_item("missing")

    def test_list_items(self, stocked):
        assert len(queries.list_items()) == 4

    def test_items_in_warehouse(self, stocked):
        skus = {i["sku"] for i in queries.items_in_warehouse(stocked["main"])}
        assert skus == {"LAPTOP-001", "DESK-001"}

    def test_items_in_unknown_warehouse_is_empty(self):
        assert queries.items_in_warehouse("missing") == []

    @pytest.mark.parametrize(
        "term,expected",
        [
            ("laptop", {"LAPTOP-001"}),
            ("desk-0", {"DESK-001"}),
            ("ELECTRONICS", {"LAPTOP-001", "MOUSE-001"}),
            ("", {"LAPTOP-001", "DESK-001", "MOUSE-001", "MISC-001"}),
            (None, {"LAPTOP-001", "DESK-001", "MOUSE-001", "MISC-001"}),
            ("nothing-like-this", set()),
        ],
    )
    def test_search_matches_name_sku_or_category(self, stocked, term, expected):
        assert {i["sku"] for i in queries.search_items(term)} == expected

    def test_search_within_warehouse(self, stocked):
        results = queries.search_items("electronics", stocked["west"])
        assert {i["sku"] for i in results} == {"MOUSE-001"}

    def test_search_finds_uncategorized_item_by_name(self, stocked):
        results = queries.search_items("GIFT")
        assert [i["sku"] for i in results] == ["MISC-001"]

    def test_search_combines_term_and_warehouse_in_one_query(self, stocked):
        _create_item(stocked["main"], "MOUSE-002", "Trackball", "Accessories", 5)
        results = queries.search_items("mouse", stocked["main"])
        assert [i["sku"] for i in results] == ["MOUSE-002"]

    def test_search_by_partial_category(self, stocked):
        results = queries.search_items("furni")
        assert [i["sku"] for i in results] == ["DESK-001"]

    def test_warehouse_filter_without_term(self, stocked):
        results = queries.search_items(None, stocked["west"])
        assert {i["sku"] for i in results} == {"MOUSE-001", "MISC-001"}

    def test_distinct_categories_sorted_without_blanks(self, stocked):
        assert queries.distinct_categories() == ["Electronics", "Furniture"]


class TestDashboard:
    def test_totals(self, stocked):
        summary = queries.dashboard()
        assert summary["total_warehouses"] == 2
        assert summary["total_items"] == 4
        assert summary["total_quantity"] == 285
        assert summary["total_capacity"] == 1100
        assert summary["used_capacity"] == 285
        assert summary["quantity_by_category"] == {"Electronics": 235, "Furniture": 50, "Uncategorized": 0}

    def test_uncategorized_stock_is_counted(self, stocked):
        _create_item(stocked["main"], "CABLE-001", "USB-C Cable", None, 40)
        _create_item(stocked["main"], "TAPE-001", "Packing Tape", "   ", 5)

        summary = queries.dashboard()

        assert summary["quantity_by_category"]["Uncategorized"] == 45
        assert sum(summary["quantity_by_category"].values()) == summary["total_quantity"]

    def test_near_capacity_warehouses(self, stocked):
        summary = queries.dashboard()
        assert [w["name"] for w in summary["near_capacity_warehouses"]] == ["West Coast Hub"]

    def test_threshold_from_environment(self, stocked, monkeypatch):
        monkeypatch.setenv("NEAR_CAPACITY_THRESHOLD", "90")
        assert queries.dashboard()["near_capacity_warehouses"] == []

    def test_empty_store(self):
        summary = queries.dashboard()
        assert summary["total_warehouses"] == 0
        assert summary["utilization_percentage"] == 0.0
