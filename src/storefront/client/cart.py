"""Shopping cart kept in client memory only."""

from storefront.client.auth import AuthContext
from storefront.client.http import ApiSession, ClientError
from storefront.client.notifications import NotificationCenter


class CartContext:
    """Maps product ids to quantities until checkout."""

    def __init__(self, api: ApiSession, notifications: NotificationCenter):
        self.api = api
        self.notifications = notifications
        self.items: dict[str, int] = {}

    @property
    def cart_quantity(self):
        return sum(self.items.values())

    def quantity_of(self, product_id):
        return self.items.get(product_id, 0)

    def add(self, product_id, quantity=1):
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        self.items[product_id] = self.quantity_of(product_id) + quantity

    def increase(self, product_id):
        self.add(product_id, 1)

    def decrease(self, product_id):
        quantity = self.quantity_of(product_id)
        if quantity <= 1:
            self.items.pop(product_id, None)
        else:
            self.items[product_id] = quantity - 1

    def remove(self, product_id):
        self.items.pop(product_id, None)

    def clear(self):
        self.items.clear()

    def total(self, products):
        """Cart value at current catalog prices. Unknown products count as 0."""
        prices = {p["_id"]: p.get("price") or 0 for p in products}
        return sum(prices.get(product_id, 0) * quantity for product_id, quantity in self.items.items())

    def order_items(self, products):
        prices = {p["_id"]: p.get("price") or 0 for p in products}
        return [
            {"_id": product_id, "quantity": quantity, "price": prices.get(product_id, 0)}
            for product_id, quantity in self.items.items()
        ]

    def checkout(self, address, auth: AuthContext, products):
        """Place an order for everything in the cart.

        The cart is emptied only when the API accepts the order.
        """
        payload = {
            "address": address,
            "orderItems": self.order_items(products),
            "userId": auth.user_id,
        }
        try:
            response = self.api.post("/api/orders", json=payload)
        except ClientError as exc:
            self.notifications.error(exc.message, title="Your order could not be placed")
            raise

        self.clear()
        self.notifications.success("Thank you for your order!", title="Order placed")
        return response["result"]
