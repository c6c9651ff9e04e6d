"""Faker-based data generators for Locust load test scenarios.

Payloads use the API's camelCase keys and pass the checkout validation rules
for addresses, line items and user ids.
"""

import random
import uuid

from faker import Faker

fake = Faker()


def shopper_id() -> str:
    """Generate user ids like 'lt-a1b2c3d4' (letters, digits, dash)."""
    return f"lt-{uuid.uuid4().hex[:8]}"


def valid_email() -> str:
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:4]}@{fake.free_email_domain()}"


def valid_zip_code() -> int:
    return random.randint(10000, 99999)


def valid_phone() -> str:
    """Generate phones the address check accepts: digits, spaces, dashes and parens."""
    return f"+1-{random.randint(200, 999)}-{random.randint(200, 999)}-{random.randint(1000, 9999)}"


def address_data() -> dict:
    return {
        "firstName": fake.first_name()[:100],
        "lastName": fake.last_name()[:100],
        "email": valid_email(),
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "zipCode": valid_zip_code(),
        "phoneNumber": valid_phone(),
    }


def cart_from_catalog(catalog: list[dict], max_lines: int = 3) -> dict[str, int]:
    """Pick a few unarchived products with small quantities."""
    available = [p for p in catalog if not p.get("isArchived") and p.get("stock", 0) > 0]
    if not available:
        return {}
    picked = random.sample(available, k=min(len(available), random.randint(1, max_lines)))
    return {p["_id"]: random.randint(1, 3) for p in picked}


def order_payload(cart: dict[str, int], catalog: list[dict], user_id: str) -> dict:
    prices = {p["_id"]: p["price"] for p in catalog}
    return {
        "address": address_data(),
        "orderItems": [
            {"_id": product_id, "quantity": quantity, "price": prices.get(product_id, 0)}
            for product_id, quantity in cart.items()
        ],
        "userId": user_id,
    }
