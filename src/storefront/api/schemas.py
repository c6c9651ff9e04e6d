"""Pydantic request/response schemas for the storefront API.

These are the external contracts the browser client speaks: camelCase keys and
`_id` for identifiers. They are kept separate from the Protean commands.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class CreateProductRequest(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "image": "https://cdn.example.com/img/lamp.jpg",
                    "title": "Desk Lamp",
                    "description": "Warm white LED lamp with a brass arm.",
                    "price": 49.0,
                    "stock": 12,
                }
            ]
        },
    )

    image: str | None = None
    title: str
    description: str | None = None
    price: FiniteFloat
    stock: int = 0
    is_archived: bool = False


class UpdateProductRequest(_CamelModel):
    image: str | None = None
    title: str | None = None
    description: str | None = None
    price: FiniteFloat | None = None
    stock: int | None = None
    is_archived: bool | None = None


class ProductResponse(_CamelModel):
    id: str = Field(alias="_id")
    image: str | None = None
    title: str
    description: str | None = None
    price: float
    stock: int
    is_archived: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_product(cls, product):
        return cls(
            id=str(product.id),
            image=product.image,
            title=product.title,
            description=product.description,
            price=product.price,
            stock=product.stock,
            is_archived=bool(product.is_archived),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(_CamelModel):
    """Checkout payload. Left untyped; the order workflow validates it."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "address": {
                        "firstName": "Ada",
                        "lastName": "Lovelace",
                        "email": "ada@example.com",
                        "street": "12 Analytical Way",
                        "city": "London",
                        "zipCode": 12345,
                        "phoneNumber": 701234567,
                    },
                    "orderItems": [{"_id": "p1", "quantity": 2, "price": 10.0}],
                    "userId": "user-001",
                }
            ]
        },
    )

    address: Any = None
    order_items: Any = None
    user_id: Any = None


class DeliveryAddressResponse(_CamelModel):
    first_name: str
    last_name: str
    email: str
    street: str
    city: str
    zip_code: str
    phone_number: str


class OrderItemResponse(_CamelModel):
    id: str = Field(alias="_id")
    quantity: int
    price: float


class OrderResponse(_CamelModel):
    id: str = Field(alias="_id")
    user_id: str
    delivery_address: DeliveryAddressResponse
    order_items: list[OrderItemResponse]
    is_shipped: bool
    total_price: float
    created_at: datetime | None = None

    @classmethod
    def from_order(cls, order):
        address = order.delivery_address
        return cls(
            id=str(order.id),
            user_id=order.user_id,
            delivery_address=DeliveryAddressResponse(
                first_name=address.first_name,
                last_name=address.last_name,
                email=address.email,
                street=address.street,
                city=address.city,
                zip_code=address.zip_code,
                phone_number=address.phone_number,
            ),
            order_items=[
                OrderItemResponse(id=str(item.product_id), quantity=item.quantity, price=item.price)
                for item in order.order_items
            ],
            is_shipped=bool(order.is_shipped),
            total_price=order.total_price,
            created_at=order.created_at,
        )


class OrderCreatedResponse(_CamelModel):
    message: str = "Order created successfully."
    result: OrderResponse


class OrderListResponse(_CamelModel):
    message: str = "All orders fetched successfully."
    orders: list[OrderResponse]


class OrderFetchedResponse(_CamelModel):
    message: str = "Order fetched successfully."
    fetched_order: OrderResponse


class UserOrdersResponse(_CamelModel):
    message: str = "All orders fetched successfully."
    fetched_list_of_orders: list[OrderResponse]


class ShipmentResponse(_CamelModel):
    message: str
    status: bool


class MessageResponse(BaseModel):
    message: str
