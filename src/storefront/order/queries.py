"""Read-side helpers for orders."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.order.order import Order


def all_orders():
    return current_domain.repository_for(Order)._dao.query.limit(None).all().items


def find_order(order_id):
    """Return the order with `order_id`, or None when it does not exist."""
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        return None


def orders_for_user(user_id):
    return current_domain.repository_for(Order)._dao.query.filter(user_id=user_id).limit(None).all().items
