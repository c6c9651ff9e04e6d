"""Integration tests for the order endpoints."""

import json

import pytest
from protean.utils.globals import current_domain
from storefront.product.product import Product


@pytest.fixture()
def products(make_product):
    return make_product(price=10.0, stock=10), make_product(price=5.0, stock=10)


@pytest.fixture()
def payload(products, address):
    first, second = products
    return {
        "address": address,
        "orderItems": [
            {"_id": str(first.id), "quantity": 2, "price": 10},
            {"_id": str(second.id), "quantity": 1, "price": 5},
        ],
        "userId": "user-001",
    }


@pytest.fixture()
def placed_order(client, payload):
    return client.post("/api/orders", json=payload).json()["result"]


class TestPlaceOrderEndpoint:
    def test_order_created(self, client, payload):
        response = client.post("/api/orders", json=payload)
        assert response.status_code == 200

        body = response.json()
        assert body["message"] == "Order created successfully."
        order = body["result"]
        assert order["totalPrice"] == 25.0
        assert order["isShipped"] is False
        assert order["userId"] == "user-001"
        assert order["deliveryAddress"]["zipCode"] == "12345"
        assert sorted(item["quantity"] for item in order["orderItems"]) == [1, 2]

    def test_stock_decremented(self, client, payload, products):
        client.post("/api/orders", json=payload)
        repo = current_domain.repository_for(Product)
        assert repo.get(products[0].id).stock == 8
        assert repo.get(products[1].id).stock == 9

    def test_archived_product_conflict(self, client, payload, make_product):
        archived = make_product(is_archived=True)
        payload["orderItems"].append({"_id": str(archived.id), "quantity": 1, "price": 1})

        response = client.post("/api/orders", json=payload)
        assert response.status_code == 409
        assert response.json()["message"] == "One of the products you have in your cart is archived."

    def test_out_of_stock_conflict(self, client, payload, products):
        payload["orderItems"][0]["quantity"] = 11

        response = client.post("/api/orders", json=payload)
        assert response.status_code == 409
        assert response.json()["message"] == "One of the products you have in your cart is out of stock."
        assert current_domain.repository_for(Product).get(products[0].id).stock == 10

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("address", {"city": "London"}, "Your address is not in the correct format."),
            ("orderItems", [], "Something wrong with the products in your order."),
            ("userId", 42, "Something wrong with your user id."),
        ],
    )
    def test_invalid_payload(self, client, payload, field, value, message):
        payload[field] = value
        response = client.post("/api/orders", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == message

    @pytest.mark.parametrize("price", [float("inf"), float("nan")])
    def test_non_finite_price_rejected(self, client, payload, products, price):
        payload["orderItems"][0]["price"] = price

        response = client.post(
            "/api/orders",
            content=json.dumps(payload),
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Something wrong with the products in your order."
        assert current_domain.repository_for(Product).get(products[0].id).stock == 10


class TestListOrdersEndpoint:
    def test_no_orders(self, client):
        response = client.get("/api/orders")
        assert response.status_code == 404
        assert response.json()["message"] == "No orders found."

    def test_all_orders(self, client, placed_order):
        response = client.get("/api/orders")
        assert response.status_code == 200
        assert response.json()["message"] == "All orders fetched successfully."
        assert [order["_id"] for order in response.json()["orders"]] == [placed_order["_id"]]


class TestGetOrderEndpoint:
    def test_requires_session(self, client, placed_order):
        response = client.get(f"/api/orders/{placed_order['_id']}")
        assert response.status_code == 401
        assert response.json()["message"] == "You are not logged in."

    def test_owner_fetches_order(self, client, sign_in, placed_order):
        sign_in(user_id="user-001")
        response = client.get(f"/api/orders/{placed_order['_id']}")
        assert response.status_code == 200
        assert response.json()["fetchedOrder"]["_id"] == placed_order["_id"]

    def test_admin_fetches_any_order(self, client, sign_in, placed_order):
        sign_in(user_id="admin-001", is_admin=True)
        response = client.get(f"/api/orders/{placed_order['_id']}")
        assert response.status_code == 200

    def test_other_user_forbidden(self, client, sign_in, placed_order):
        sign_in(user_id="user-002")
        response = client.get(f"/api/orders/{placed_order['_id']}")
        assert response.status_code == 403

    def test_unknown_order(self, client, sign_in):
        sign_in(user_id="user-001")
        response = client.get("/api/orders/missing")
        assert response.status_code == 404


class TestOrdersForUserEndpoint:
    def test_requires_session(self, client):
        response = client.get("/api/orders/user/user-001")
        assert response.status_code == 401
        assert response.json()["message"] == "User is not logged in."

    def test_plain_user_rejected_for_own_orders(self, client, sign_in, placed_order):
        sign_in(user_id="user-001")
        response = client.get("/api/orders/user/user-001")
        assert response.status_code == 401
        assert response.json()["message"] == "User is not authorized to see this order."

    def test_admin_rejected_for_other_users_orders(self, client, sign_in, placed_order):
        sign_in(user_id="admin-001", is_admin=True)
        response = client.get("/api/orders/user/user-001")
        assert response.status_code == 401

    def test_admin_lists_own_orders(self, client, sign_in, payload):
        payload["userId"] = "admin-001"
        client.post("/api/orders", json=payload)
        sign_in(user_id="admin-001", is_admin=True)

        response = client.get("/api/orders/user/admin-001")
        assert response.status_code == 200
        orders = response.json()["fetchedListOfOrders"]
        assert len(orders) == 1
        assert orders[0]["userId"] == "admin-001"

    def test_empty_list_is_ok(self, client, sign_in):
        sign_in(user_id="admin-001", is_admin=True)
        response = client.get("/api/orders/user/admin-001")
        assert response.status_code == 200
        assert response.json()["fetchedListOfOrders"] == []


class TestToggleShipmentEndpoint:
    def test_toggle_twice(self, client, placed_order):
        path = f"/api/orders/{placed_order['_id']}"

        first = client.patch(path)
        assert first.status_code == 200
        assert first.json() == {"message": "Order shipped successfully.", "status": True}

        second = client.patch(path)
        assert second.json() == {"message": "Order has been unshipped.", "status": False}

    def test_unknown_order(self, client):
        response = client.patch("/api/orders/missing")
        assert response.status_code == 404
        assert response.json()["message"] == "Order not found."
