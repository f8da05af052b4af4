"""Warehousing load test scenarios.

Two stateful SequentialTaskSet journeys (stocking and moving inventory,
browsing the read side) plus a contention user that hammers one shared
warehouse with concurrent transfers and checks it never overfills.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import item_data, transfer_data, warehouse_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import WarehouseState

CONTENTION_WAREHOUSE = "Load Test Contention Target"
CONTENTION_CAPACITY = 200


class StockAndTransferJourney(SequentialTaskSet):
    """Create Warehouses -> Stock Items -> Partial Transfer -> Full Transfer -> Clean Up.

    Models a warehouse manager opening a site, receiving stock and
    rebalancing it to a second site.
    """

    def on_start(self):
        self.state = WarehouseState()

    def _create_warehouse(self):
        with self.client.post(
            "/api/warehouses",
            json=warehouse_data(),
            catch_response=True,
            name="POST /api/warehouses",
        ) as resp:
            if resp.status_code == 201:
                return resp.json()["id"]
            resp.failure(f"Create warehouse failed: {resp.status_code} — {extract_error_detail(resp)}")
            self.interrupt()

    @task
    def create_warehouses(self):
        self.state.source_warehouse_id = self._create_warehouse()
        self.state.destination_warehouse_id = self._create_warehouse()

    @task
    def stock_items(self):
        for _ in range(random.randint(2, 4)):
            with self.client.post(
                "/api/items",
                json=item_data(self.state.source_warehouse_id, quantity=random.randint(10, 50)),
                catch_response=True,
                name="POST /api/items",
            ) as resp:
                if resp.status_code == 201:
                    self.state.item_ids.append(resp.json()["id"])
                else:
                    resp.failure(f"Create item failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def partial_transfer(self):
        if not self.state.item_ids:
            self.interrupt()
        with self.client.post(
            "/api/items/transfer",
            json=transfer_data(
                self.state.item_ids[0],
                self.state.source_warehouse_id,
                self.state.destination_warehouse_id,
                quantity=5,
            ),
            catch_response=True,
            name="POST /api/items/transfer (partial)",
        ) as resp:
            if resp.status_code == 200:
                self.state.moved_item_ids.append(resp.json()["id"])
            else:
                resp.failure(f"Partial transfer failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def full_transfer(self):
        item_id = self.state.item_ids[-1]
        item = self.client.get(f"/api/items/{item_id}", name="GET /api/items/{id}").json()
        with self.client.post(
            "/api/items/transfer",
            json=transfer_data(
                item_id,
                self.state.source_warehouse_id,
                self.state.destination_warehouse_id,
                quantity=item["quantity"],
            ),
            catch_response=True,
            name="POST /api/items/transfer (full)",
        ) as resp:
            if resp.status_code == 200:
                self.state.item_ids.remove(item_id)
                self.state.moved_item_ids.append(item_id)
            else:
                resp.failure(f"Full transfer failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def check_capacity(self):
        for warehouse_id in (self.state.source_warehouse_id, self.state.destination_warehouse_id):
            with self.client.get(
                f"/api/warehouses/{warehouse_id}",
                catch_response=True,
                name="GET /api/warehouses/{id}",
            ) as resp:
                body = resp.json()
                if body["current_capacity"] > body["max_capacity"]:
                    resp.failure(f"Warehouse over capacity: {body['current_capacity']}/{body['max_capacity']}")

    @task
    def clean_up(self):
        for item_id in self.state.item_ids + self.state.moved_item_ids:
            self.client.delete(f"/api/items/{item_id}", name="DELETE /api/items/{id}")
        for warehouse_id in (self.state.source_warehouse_id, self.state.destination_warehouse_id):
            with self.client.delete(
                f"/api/warehouses/{warehouse_id}",
                catch_response=True,
                name="DELETE /api/warehouses/{id}",
            ) as resp:
                if resp.status_code != 204:
                    resp.failure(f"Delete warehouse failed: {resp.status_code} — {extract_error_detail(resp)}")
        self.interrupt()


class BrowseJourney(SequentialTaskSet):
    """List -> Search -> Categories -> Dashboard.

    Models read-heavy traffic from the overview screens.
    """

    @task
    def list_warehouses(self):
        self.client.get("/api/warehouses", name="GET /api/warehouses")

    @task
    def search(self):
        self.client.get("/api/warehouses/search", params={"name": "depot"}, name="GET /api/warehouses/search")
        self.client.get(
            "/api/items/search",
            params={"search_term": random.choice(["lt-", "electronics", "furniture"])},
            name="GET /api/items/search",
        )

    @task
    def categories(self):
        self.client.get("/api/items/categories", name="GET /api/items/categories")

    @task
    def dashboard(self):
        self.client.get("/api/dashboard", name="GET /api/dashboard")
        self.interrupt()


class WarehousingUser(HttpUser):
    """Day-to-day warehousing traffic: mostly reads, some stock movement."""

    wait_time = between(0.5, 2.0)
    tasks = {
        StockAndTransferJourney: 3,
        BrowseJourney: 7,
    }


class CapacityContentionUser(HttpUser):
    """Many users transferring into one small warehouse at once.

    Each user stocks its own source warehouse, then repeatedly moves single
    units into the shared target. Refusals for lack of room are expected;
    the target reporting more stock than capacity is a failure.
    """

    wait_time = between(0.1, 0.5)

    def on_start(self):
        self.target_id = self._shared_target()
        source = self.client.post("/api/warehouses", json=warehouse_data(max_capacity=1000), name="POST /api/warehouses")
        self.source_id = source.json()["id"]
        item = self.client.post("/api/items", json=item_data(self.source_id, quantity=500), name="POST /api/items")
        self.item_id = item.json()["id"]

    def _shared_target(self):
        resp = self.client.post(
            "/api/warehouses",
            json={"name": CONTENTION_WAREHOUSE, "location": "Shared", "max_capacity": CONTENTION_CAPACITY},
            name="POST /api/warehouses (target)",
        )
        if resp.status_code == 201:
            return resp.json()["id"]
        found = self.client.get(
            "/api/warehouses/search", params={"name": CONTENTION_WAREHOUSE}, name="GET /api/warehouses/search"
        ).json()
        return found[0]["id"]

    @task(5)
    def transfer_one(self):
        with self.client.post(
            "/api/items/transfer",
            json=transfer_data(self.item_id, self.source_id, self.target_id, quantity=1),
            catch_response=True,
            name="POST /api/items/transfer (contended)",
        ) as resp:
            if resp.status_code in (200, 400, 409):
                resp.success()
            else:
                resp.failure(f"Transfer failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task(1)
    def check_target(self):
        with self.client.get(
            f"/api/warehouses/{self.target_id}",
            catch_response=True,
            name="GET /api/warehouses/{id} (target)",
        ) as resp:
            body = resp.json()
            if body["current_capacity"] > body["max_capacity"]:
                resp.failure(f"Target over capacity: {body['current_capacity']}/{body['max_capacity']}")
