"""Order placement: the checkout workflow.

The handler loads each referenced product once and uses that snapshot for every
check and for the stock update. Products are persisted through the repository,
whose version check turns a concurrent stock change into ExpectedVersionError
instead of a silent oversell. The command handler runs inside a unit of work,
so a rejected order leaves stock untouched.
"""

import json
from collections import Counter

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import ArchivedProductInCart, ProductOutOfStock
from storefront.order.order import Order
from storefront.order.validation import (
    product_id_of,
    quantity_of,
    validate_address,
    validate_order_items,
    validate_user_id,
)
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    # Raw JSON as received. Shape checks happen in the handler so that stock
    # conflicts are reported before payload errors.
    address = Text()
    order_items = Text()
    user_id = Text()


def _decode(value):
    if value is None:
        return None
    return json.loads(value) if isinstance(value, str) else value


def _requested_quantities(raw_items):
    """Sum whole-number quantities per product across all line items."""
    requested = Counter()
    if not isinstance(raw_items, list):
        return requested
    for item in raw_items:
        product_id = product_id_of(item)
        quantity = quantity_of(item)
        if product_id is not None and quantity is not None:
            requested[product_id] += quantity
    return requested


def _referenced_product_ids(raw_items):
    if not isinstance(raw_items, list):
        return []
    ids = (product_id_of(item) for item in raw_items)
    return list(dict.fromkeys(pid for pid in ids if pid is not None))


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        raw_address = _decode(command.address)
        raw_items = _decode(command.order_items)
        raw_user_id = _decode(command.user_id)

        product_repo = current_domain.repository_for(Product)
        snapshots = self._load_snapshots(product_repo, _referenced_product_ids(raw_items))

        for product_id, product in snapshots.items():
            if product is not None and product.is_archived:
                logger.warning("order_rejected", reason="archived_product", product_id=product_id)
                raise ArchivedProductInCart(product_id)

        requested = _requested_quantities(raw_items)
        for product_id, quantity in requested.items():
            product = snapshots.get(product_id)
            if product is None or not product.has_stock_for(quantity):
                logger.warning(
                    "order_rejected",
                    reason="out_of_stock",
                    product_id=product_id,
                    requested=quantity,
                    available=product.stock if product is not None else None,
                )
                raise ProductOutOfStock(product_id)

        delivery_address = validate_address(raw_address)
        items = validate_order_items(raw_items)
        user_id = validate_user_id(raw_user_id)

        for product_id, quantity in requested.items():
            product = snapshots[product_id]
            product.withdraw_stock(quantity)
            product_repo.add(product)
            logger.info("stock_withdrawn", product_id=product_id, quantity=quantity, remaining=product.stock)

        order = Order.place(user_id=user_id, delivery_address=delivery_address, items_data=items)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=user_id,
            item_count=len(items),
            total_price=order.total_price,
        )
        return str(order.id)

    @staticmethod
    def _load_snapshots(repo, product_ids):
        snapshots = {}
        for product_id in product_ids:
            try:
                snapshots[product_id] = repo.get(product_id)
            except ObjectNotFoundError:
                snapshots[product_id] = None
        return snapshots
