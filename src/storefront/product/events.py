"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    title = String(required=True)
    price = Float(required=True)
    stock = Integer(required=True)
    added_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    __version__ = 1

    product_id = Identifier(required=True)
    title = String(required=True)
    price = Float(required=True)
    stock = Integer(required=True)
    is_archived = Boolean(default=False)


@storefront.event(part_of="Product")
class ProductArchived:
    """A product was withdrawn from sale. Orders referencing it are rejected."""

    __version__ = 1

    product_id = Identifier(required=True)
    archived_at = DateTime(required=True)


@storefront.event(part_of="Product")
class StockWithdrawn:
    """Stock left the shelf because an order was placed."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)


@storefront.event(part_of="Product")
class ProductRemoved:
    """A product is about to be deleted from the catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    title = String(required=True)
    removed_at = DateTime(required=True)
