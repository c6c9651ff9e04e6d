"""Python client for the storefront API.

`Storefront` bundles the client contexts so they can be handed around as one
object instead of living in module globals.
"""

from storefront.client.auth import AuthContext
from storefront.client.cart import CartContext
from storefront.client.http import ApiSession, ClientError
from storefront.client.notifications import Notification, NotificationCenter
from storefront.client.orders import OrderContext
from storefront.client.products import ProductContext


class Storefront:
    def __init__(self, http=None, base_url=None):
        self.api = ApiSession(http=http, base_url=base_url)
        self.notifications = NotificationCenter()
        self.auth = AuthContext()
        self.products = ProductContext(self.api, self.notifications)
        self.cart = CartContext(self.api, self.notifications)
        self.orders = OrderContext(self.api, self.notifications)

    def checkout(self, address):
        """Check out the cart as the signed-in user at the loaded catalog prices."""
        return self.cart.checkout(address, self.auth, self.products.products)


__all__ = [
    "ApiSession",
    "AuthContext",
    "CartContext",
    "ClientError",
    "Notification",
    "NotificationCenter",
    "OrderContext",
    "ProductContext",
    "Storefront",
]
