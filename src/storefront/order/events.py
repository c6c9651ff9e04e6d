"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer checked out their cart and stock was withdrawn."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = String(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity, price}
    item_count = Integer(required=True)
    total_price = Float(required=True)
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderShipped:
    __version__ = 1

    order_id = Identifier(required=True)
    shipped_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderUnshipped:
    """An admin reverted the shipped flag."""

    __version__ = 1

    order_id = Identifier(required=True)
    unshipped_at = DateTime(required=True)
