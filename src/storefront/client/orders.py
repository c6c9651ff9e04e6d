"""Order lists for the account page and the admin dashboard."""

from storefront.client.http import ApiSession, ClientError
from storefront.client.notifications import NotificationCenter


class OrderContext:
    def __init__(self, api: ApiSession, notifications: NotificationCenter):
        self.api = api
        self.notifications = notifications
        self.orders: list[dict] = []

    def load_all(self):
        """Fetch every order. The API answers 404 when there are none."""
        try:
            self.orders = self.api.get("/api/orders")["orders"]
        except ClientError as exc:
            if exc.status_code != 404:
                raise
            self.orders = []
        return self.orders

    def load_for_user(self, user_id):
        self.orders = self.api.get(f"/api/orders/user/{user_id}")["fetchedListOfOrders"]
        return self.orders

    def fetch(self, order_id):
        return self.api.get(f"/api/orders/{order_id}")["fetchedOrder"]

    def toggle_shipped(self, order_id):
        """Flip the shipped flag on the server and mirror it locally."""
        try:
            response = self.api.patch(f"/api/orders/{order_id}")
        except ClientError as exc:
            self.notifications.error(exc.message, title="Failed to change shipped status")
            raise

        is_shipped = response["status"]
        for order in self.orders:
            if order["_id"] == order_id:
                order["isShipped"] = is_shipped
        self.notifications.success("The orders shipping status has been updated")
        return is_shipped
