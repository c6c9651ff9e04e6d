"""Product aggregate root."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from storefront.domain import storefront
from storefront.product.events import (
    ProductAdded,
    ProductArchived,
    ProductRemoved,
    ProductUpdated,
    StockWithdrawn,
)

# Attributes an admin may change through the product management endpoints
EDITABLE_FIELDS = ("image", "title", "description", "price", "stock", "is_archived")


@storefront.aggregate
class Product:
    """A sellable item in the catalog.

    Stock is only ever decreased by placing orders; admins set it directly when
    editing the product. Archived products stay visible to existing orders but
    can no longer be bought.
    """

    image = String(max_length=500)
    title = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    stock = Integer(default=0, min_value=0)
    is_archived = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, title, price, stock=0, image=None, description=None, is_archived=False):
        now = datetime.now(UTC)
        product = cls(
            image=image,
            title=title,
            description=description,
            price=price,
            stock=stock,
            is_archived=is_archived,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                title=title,
                price=price,
                stock=stock,
                added_at=now,
            )
        )
        return product

    def update(self, **changes):
        """Apply admin edits. Keys outside EDITABLE_FIELDS are rejected."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Field cannot be edited"] for field in sorted(unknown)})

        archive = changes.pop("is_archived", None)
        for field, value in changes.items():
            if value is not None:
                setattr(self, field, value)

        if archive and not self.is_archived:
            self.archive()
        elif archive is False:
            self.is_archived = False

        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=str(self.id),
                title=self.title,
                price=self.price,
                stock=self.stock,
                is_archived=self.is_archived,
            )
        )

    def archive(self):
        """Withdraw the product from sale."""
        if self.is_archived:
            raise ValidationError({"is_archived": ["Product is already archived"]})

        now = datetime.now(UTC)
        self.is_archived = True
        self.updated_at = now
        self.raise_(ProductArchived(product_id=str(self.id), archived_at=now))

    def remove(self):
        """Announce the deletion. The repository removes the record afterwards."""
        self.raise_(ProductRemoved(product_id=str(self.id), title=self.title, removed_at=datetime.now(UTC)))

    def has_stock_for(self, quantity):
        return self.stock >= quantity

    def withdraw_stock(self, quantity):
        """Take `quantity` units off the shelf for an order."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if self.is_archived:
            raise ValidationError({"is_archived": ["Archived products cannot be sold"]})
        if not self.has_stock_for(quantity):
            raise ValidationError({"stock": [f"Insufficient stock: {self.stock} available, {quantity} requested"]})

        previous = self.stock
        self.stock = previous - quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockWithdrawn(
                product_id=str(self.id),
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )
