"""Checkout load test scenarios.

ShopperJourney walks one shopper through browse, cart and checkout.
StockContentionUser hammers the same few products so concurrent orders
race for the last units; a 409 there is the expected outcome.
"""

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import cart_from_catalog, order_payload, shopper_id
from loadtests.helpers.state import ShopperState
from storefront.client.http import extract_error_detail


class ShopperJourney(SequentialTaskSet):
    """Browse catalog -> View product -> Check out -> Review order list."""

    def on_start(self):
        self.state = ShopperState(user_id=shopper_id())

    @task
    def browse_catalog(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code == 200:
                self.state.catalog = resp.json()
            else:
                resp.failure(f"Browse failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def view_product(self):
        if not self.state.catalog:
            self.interrupt()
        product_id = self.state.catalog[0]["_id"]
        self.client.get(f"/api/products/{product_id}", name="GET /api/products/{id}")

    @task
    def checkout(self):
        self.state.cart = cart_from_catalog(self.state.catalog)
        if not self.state.cart:
            self.interrupt()

        payload = order_payload(self.state.cart, self.state.catalog, self.state.user_id)
        with self.client.post("/api/orders", json=payload, catch_response=True, name="POST /api/orders") as resp:
            if resp.status_code == 200:
                self.state.order_ids.append(resp.json()["result"]["_id"])
            elif resp.status_code == 409:
                # Someone else bought the last units first
                self.state.rejected += 1
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def list_orders(self):
        with self.client.get("/api/orders", catch_response=True, name="GET /api/orders") as resp:
            if resp.status_code in (200, 404):
                resp.success()
            else:
                resp.failure(f"List orders failed: {resp.status_code} - {extract_error_detail(resp)}")
        self.interrupt()


class StorefrontShopper(HttpUser):
    tasks = [ShopperJourney]
    wait_time = between(1, 3)


class StockContentionUser(HttpUser):
    """Stress test: many shoppers ordering the same low-stock products.

    Monitor: stock must never go negative and every 200 must be matched by
    a decrement; the rest should come back as 409.
    """

    wait_time = constant_pacing(0.2)

    def on_start(self):
        self.user_id = shopper_id()
        resp = self.client.get("/api/products", name="[CONTENTION] GET /api/products")
        catalog = resp.json() if resp.status_code == 200 else []
        self.catalog = sorted(catalog, key=lambda p: p.get("stock", 0))[:2]

    @task
    def order_scarce_products(self):
        if not self.catalog:
            return
        cart = {product["_id"]: 1 for product in self.catalog}
        with self.client.post(
            "/api/orders",
            json=order_payload(cart, self.catalog, self.user_id),
            catch_response=True,
            name="[CONTENTION] POST /api/orders",
        ) as resp:
            if resp.status_code in (200, 409):
                resp.success()
            else:
                resp.failure(f"Unexpected status {resp.status_code}: {extract_error_detail(resp)}")
