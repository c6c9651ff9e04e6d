"""Checkout payload validation.

Each check either returns a cleaned value or raises `InvalidOrder` with the
message shown to the customer. Callers run them in the order
address, items, user id and stop at the first failure.
"""

import math
import re

from protean.exceptions import ValidationError

from storefront.errors import (
    INVALID_ADDRESS_MESSAGE,
    INVALID_ITEMS_MESSAGE,
    INVALID_USER_ID_MESSAGE,
    InvalidOrder,
)
from storefront.order.order import DeliveryAddress

_USER_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

# Incoming key -> DeliveryAddress field. Accepts the client's camelCase too.
_ADDRESS_KEYS = {
    "first_name": "first_name",
    "firstName": "first_name",
    "last_name": "last_name",
    "lastName": "last_name",
    "email": "email",
    "street": "street",
    "city": "city",
    "zip_code": "zip_code",
    "zipCode": "zip_code",
    "phone_number": "phone_number",
    "phoneNumber": "phone_number",
}
_TEXT_FIELDS = ("first_name", "last_name", "email", "street", "city")
_NUMBER_FIELDS = ("zip_code", "phone_number")


def product_id_of(item):
    """Return the product identifier of a raw line item, or None."""
    if not isinstance(item, dict):
        return None
    product_id = item.get("_id", item.get("product_id"))
    if isinstance(product_id, str) and product_id.strip():
        return product_id
    return None


def quantity_of(item):
    """Return the requested quantity of a raw line item when it is a whole number."""
    if not isinstance(item, dict):
        return None
    quantity = item.get("quantity")
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return None
    return quantity


def validate_address(raw):
    if not isinstance(raw, dict):
        raise InvalidOrder(INVALID_ADDRESS_MESSAGE)

    values = {}
    for key, value in raw.items():
        field = _ADDRESS_KEYS.get(key)
        if field is not None:
            values[field] = value

    for field in _TEXT_FIELDS:
        value = values.get(field)
        if not isinstance(value, str) or not value.strip():
            raise InvalidOrder(INVALID_ADDRESS_MESSAGE)
        values[field] = value.strip()

    for field in _NUMBER_FIELDS:
        value = values.get(field)
        if isinstance(value, bool) or not isinstance(value, int | str):
            raise InvalidOrder(INVALID_ADDRESS_MESSAGE)
        values[field] = str(value).strip()

    try:
        return DeliveryAddress(**values)
    except ValidationError as exc:
        raise InvalidOrder(INVALID_ADDRESS_MESSAGE) from exc


def validate_order_items(raw):
    """Return line items as dicts of product_id, quantity and price."""
    if not isinstance(raw, list) or not raw:
        raise InvalidOrder(INVALID_ITEMS_MESSAGE)

    items = []
    for item in raw:
        product_id = product_id_of(item)
        quantity = quantity_of(item)
        price = item.get("price") if isinstance(item, dict) else None

        if product_id is None or quantity is None or quantity < 1:
            raise InvalidOrder(INVALID_ITEMS_MESSAGE)
        if isinstance(price, bool) or not isinstance(price, int | float):
            raise InvalidOrder(INVALID_ITEMS_MESSAGE)
        if not math.isfinite(price) or price < 0:
            raise InvalidOrder(INVALID_ITEMS_MESSAGE)

        items.append({"product_id": product_id, "quantity": quantity, "price": float(price)})
    return items


def validate_user_id(raw):
    if not isinstance(raw, str) or not _USER_ID.match(raw):
        raise InvalidOrder(INVALID_USER_ID_MESSAGE)
    return raw
