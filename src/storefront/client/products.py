"""Client-side mirror of the product catalog."""

from storefront.client.http import ApiSession, ClientError
from storefront.client.notifications import NotificationCenter


class ProductContext:
    """Holds the catalog fetched from the API.

    The list is fetched once; afterwards each mutation calls the API and splices
    the server's answer into the local list by `_id`, without re-fetching.
    Changes made by other clients are not picked up until `load(force=True)`.
    """

    def __init__(self, api: ApiSession, notifications: NotificationCenter):
        self.api = api
        self.notifications = notifications
        self.products: list[dict] = []
        self.loaded = False

    def load(self, force=False):
        if self.loaded and not force:
            return self.products
        self.products = self.api.get("/api/products")
        self.loaded = True
        return self.products

    def find(self, product_id):
        return next((p for p in self.products if p["_id"] == product_id), None)

    def add_product(self, product):
        try:
            created = self.api.post("/api/products", json=product)
        except ClientError as exc:
            self.notifications.error(exc.message, title="Could not add product")
            raise
        self.products = [*self.products, created]
        self.notifications.success(f"{created['title']} was added")
        return created

    def update_product(self, product):
        product_id = product["_id"]
        try:
            updated = self.api.put(f"/api/products/{product_id}", json=product)
        except ClientError as exc:
            self.notifications.error(exc.message, title="Could not update product")
            raise
        self.products = [updated if p["_id"] == product_id else p for p in self.products]
        self.notifications.success(f"{updated['title']} was updated")
        return updated

    def delete_product(self, product_id):
        try:
            self.api.delete(f"/api/products/{product_id}")
        except ClientError as exc:
            self.notifications.error(exc.message, title="Could not delete product")
            raise
        self.products = [p for p in self.products if p["_id"] != product_id]
        self.notifications.success("The product was deleted")
