"""Order aggregate with its delivery address and line items.

An order is written once by checkout. Afterwards only the shipped flag moves;
prices and the total stay as they were when the customer paid, whatever happens
to the catalog later.
"""

import json
import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderShipped, OrderUnshipped

_ZIP_CODE = re.compile(r"^\d{3,10}$")
_PHONE_NUMBER = re.compile(r"^\+?[\d\s\-()]{5,20}$")
_FORBIDDEN_EMAIL_CHARS = (" ", ";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@storefront.value_object(part_of="Order")
class DeliveryAddress:
    """Where and to whom the order is delivered."""

    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=10)
    phone_number = String(required=True, max_length=20)

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        if email.count("@") != 1 or any(ch in email for ch in _FORBIDDEN_EMAIL_CHARS):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)
        if not local_part or "." not in domain_part.strip("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})
        if ".." in email:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @invariant.post
    def zip_code_must_be_numeric(self):
        if not _ZIP_CODE.match(self.zip_code or ""):
            raise ValidationError({"zip_code": [f"Invalid zip code: {self.zip_code!r}"]})

    @invariant.post
    def phone_number_must_contain_digits(self):
        number = self.phone_number or ""
        if not _PHONE_NUMBER.match(number) or not re.search(r"\d", number):
            raise ValidationError({"phone_number": [f"Invalid phone number: {number!r}"]})


@storefront.entity(part_of="Order")
class OrderItem:
    """One product line. `price` is the unit price the customer saw."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)

    @property
    def line_total(self):
        return self.price * self.quantity


@storefront.aggregate
class Order:
    user_id = String(required=True, max_length=64)
    delivery_address = ValueObject(DeliveryAddress, required=True)
    order_items = HasMany(OrderItem)
    is_shipped = Boolean(default=False)
    total_price = Float(default=0.0, min_value=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, user_id, delivery_address, items_data):
        """Build a new, unshipped order.

        Args:
            user_id: Identifier of the customer placing the order.
            delivery_address: A DeliveryAddress value object.
            items_data: List of dicts with product_id, quantity and price.
        """
        now = datetime.now(UTC)
        items = [
            OrderItem(product_id=item["product_id"], quantity=item["quantity"], price=item["price"])
            for item in items_data
        ]
        total_price = round(sum(item.line_total for item in items), 2)

        order = cls(
            user_id=user_id,
            delivery_address=delivery_address,
            order_items=items,
            is_shipped=False,
            total_price=total_price,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=user_id,
                items=json.dumps(items_data),
                item_count=len(items),
                total_price=total_price,
                placed_at=now,
            )
        )
        return order

    def is_visible_to(self, user):
        """Admins see every order, customers only their own."""
        return bool(user.is_admin) or str(user.id) == str(self.user_id)

    def toggle_shipped(self):
        """Flip the shipped flag and return its new value."""
        now = datetime.now(UTC)
        self.is_shipped = not self.is_shipped
        self.updated_at = now

        if self.is_shipped:
            self.raise_(OrderShipped(order_id=str(self.id), shipped_at=now))
        else:
            self.raise_(OrderUnshipped(order_id=str(self.id), unshipped_at=now))
        return self.is_shipped
