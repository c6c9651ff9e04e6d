"""Application tests for the shipment toggle handler."""

import json

import pytest
from protean.utils.globals import current_domain
from storefront.errors import ResourceNotFound
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.order.shipping import ToggleShipment


@pytest.fixture()
def order_id(make_product, address):
    product = make_product(stock=5)
    command = PlaceOrder(
        address=json.dumps(address),
        order_items=json.dumps([{"_id": str(product.id), "quantity": 1, "price": 10}]),
        user_id=json.dumps("user-001"),
    )
    return current_domain.process(command, asynchronous=False)


class TestToggleShipmentHandler:
    def test_first_toggle_ships(self, order_id):
        assert current_domain.process(ToggleShipment(order_id=order_id), asynchronous=False) is True
        assert current_domain.repository_for(Order).get(order_id).is_shipped is True

    def test_second_toggle_unships(self, order_id):
        current_domain.process(ToggleShipment(order_id=order_id), asynchronous=False)
        assert current_domain.process(ToggleShipment(order_id=order_id), asynchronous=False) is False
        assert current_domain.repository_for(Order).get(order_id).is_shipped is False

    def test_toggle_keeps_total(self, order_id):
        current_domain.process(ToggleShipment(order_id=order_id), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).total_price == 10.0

    def test_missing_order(self):
        with pytest.raises(ResourceNotFound):
            current_domain.process(ToggleShipment(order_id="missing"), asynchronous=False)
