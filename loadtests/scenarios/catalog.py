"""Catalog load test scenarios.

A stateful SequentialTaskSet journey through the product lifecycle, plus a
read-heavy browsing user. Journey steps execute in order and each depends on
the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    product_data,
    product_price,
    replacement_data,
    search_fragment,
)
from loadtests.helpers.state import ProductState


class ProductLifecycleJourney(SequentialTaskSet):
    """Add -> Read -> Stock Status -> Replace -> Reprice -> Delete.

    Generates 3 events: ProductAdded, ProductUpdated, ProductPriceChanged.
    """

    def on_start(self):
        self.state = ProductState()

    @task
    def add_product(self):
        payload = product_data()
        with self.client.post(
            "/products",
            json=payload,
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["id"]
                self.state.name = payload["name"]
                self.state.quantity = payload["quantity"]
            else:
                resp.failure(f"Add product failed: {resp.status_code}")
                self.interrupt()

    @task
    def get_product(self):
        with self.client.get(
            f"/products/{self.state.product_id}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get product failed: {resp.status_code}")

    @task
    def get_stock_status(self):
        with self.client.get(
            f"/products/{self.state.product_id}/status",
            catch_response=True,
            name="GET /products/{id}/status",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Stock status failed: {resp.status_code}")

    @task
    def replace_product(self):
        payload = replacement_data(self.state.name)
        with self.client.put(
            f"/products/{self.state.product_id}",
            json=payload,
            catch_response=True,
            name="PUT /products/{id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.quantity = payload["quantity"]
            else:
                resp.failure(f"Replace product failed: {resp.status_code}")

    @task
    def change_price(self):
        price = product_price()
        with self.client.patch(
            f"/products/{self.state.product_id}/price",
            json={"price": price},
            catch_response=True,
            name="PATCH /products/{id}/price",
        ) as resp:
            if resp.status_code == 200:
                self.state.price = price
            else:
                resp.failure(f"Change price failed: {resp.status_code}")

    @task
    def delete_product(self):
        # Leave some products behind so listings and health have data
        if random.random() < 0.5:
            self.interrupt()
            return

        with self.client.delete(
            f"/products/{self.state.product_id}",
            catch_response=True,
            name="DELETE /products/{id}",
        ) as resp:
            if resp.status_code == 204:
                self.state.deleted = True
            else:
                resp.failure(f"Delete product failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class DuplicateNameJourney(SequentialTaskSet):
    """Add -> Add again under the same name, expecting a 409 conflict."""

    def on_start(self):
        self.state = ProductState()

    @task
    def add_product(self):
        payload = product_data()
        with self.client.post(
            "/products",
            json=payload,
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["id"]
                self.state.name = payload["name"]
            else:
                resp.failure(f"Add product failed: {resp.status_code}")
                self.interrupt()

    @task
    def add_duplicate(self):
        payload = product_data()
        payload["name"] = self.state.name
        with self.client.post(
            "/products",
            json=payload,
            catch_response=True,
            name="POST /products [duplicate]",
        ) as resp:
            if resp.status_code == 409:
                resp.success()
            else:
                resp.failure(f"Expected 409 for duplicate name, got {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class CatalogUser(HttpUser):
    """Locust user simulating catalog maintenance.

    Weighted distribution:
    - 80% Product Lifecycle
    - 20% Duplicate Name submissions
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        ProductLifecycleJourney: 4,
        DuplicateNameJourney: 1,
    }


class CatalogBrowserUser(HttpUser):
    """Read-only user browsing listings, searching and polling health."""

    wait_time = between(0.2, 1.0)

    @task(4)
    def browse_page(self):
        self.client.get(
            "/products/paginated",
            params={"page": random.randint(0, 3), "sort_by": random.choice(["name", "price", "quantity"])},
            name="GET /products/paginated",
        )

    @task(3)
    def search(self):
        self.client.get(
            "/products/search/paginated",
            params={"name": search_fragment()},
            name="GET /products/search/paginated",
        )

    @task(1)
    def health(self):
        with self.client.get("/metrics/health", catch_response=True, name="GET /metrics/health") as resp:
            # DOWN and DEGRADED verdicts are answers, not failures
            if resp.status_code == 503:
                resp.failure("Inventory health counts unavailable")
