"""FastAPI routes for products and orders.

Thin adapters: session checks, schema to command translation, and response
shaping. Business rules live in the command handlers.
"""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    CreateProductRequest,
    MessageResponse,
    OrderCreatedResponse,
    OrderFetchedResponse,
    OrderListResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProductResponse,
    ShipmentResponse,
    UpdateProductRequest,
    UserOrdersResponse,
)
from storefront.errors import Forbidden, NotAuthenticated, NotAuthorized, ResourceNotFound
from storefront.order.placement import PlaceOrder
from storefront.order.queries import all_orders, find_order, orders_for_user
from storefront.order.shipping import ToggleShipment
from storefront.product.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.product.product import Product
from storefront.session.session import SessionUser, get_session_user, require_admin

product_router = APIRouter(prefix="/api/products", tags=["products"])
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product)._dao.query.limit(None).all().items
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest, admin: SessionUser = Depends(require_admin)) -> ProductResponse:
    command = CreateProduct(
        image=body.image,
        title=body.title,
        description=body.description,
        price=body.price,
        stock=body.stock,
        is_archived=body.is_archived,
    )
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: UpdateProductRequest, admin: SessionUser = Depends(require_admin)
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        image=body.image,
        title=body.title,
        description=body.description,
        price=body.price,
        stock=body.stock,
        is_archived=body.is_archived,
    )
    current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


@product_router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, admin: SessionUser = Depends(require_admin)) -> MessageResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product deleted.")


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.post("", response_model=OrderCreatedResponse)
async def place_order(body: PlaceOrderRequest) -> OrderCreatedResponse:
    command = PlaceOrder(
        address=json.dumps(body.address),
        order_items=json.dumps(body.order_items),
        user_id=json.dumps(body.user_id),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderCreatedResponse(result=OrderResponse.from_order(find_order(order_id)))


@order_router.get("", response_model=OrderListResponse)
async def list_orders() -> OrderListResponse:
    orders = all_orders()
    if not orders:
        raise ResourceNotFound("No orders found.")
    return OrderListResponse(orders=[OrderResponse.from_order(order) for order in orders])


@order_router.get("/user/{user_id}", response_model=UserOrdersResponse)
async def list_orders_for_user(
    user_id: str, user: SessionUser | None = Depends(get_session_user)
) -> UserOrdersResponse:
    if user is None:
        raise NotAuthenticated("User is not logged in.")
    # Both conditions must hold: only an admin asking for their own orders passes.
    if not user.is_admin or user.id != user_id:
        raise NotAuthorized("User is not authorized to see this order.")

    orders = orders_for_user(user_id)
    return UserOrdersResponse(fetched_list_of_orders=[OrderResponse.from_order(order) for order in orders])


@order_router.get("/{order_id}", response_model=OrderFetchedResponse)
async def get_order(order_id: str, user: SessionUser | None = Depends(get_session_user)) -> OrderFetchedResponse:
    if user is None:
        raise NotAuthenticated("You are not logged in.")

    order = find_order(order_id)
    if order is None:
        raise ResourceNotFound("Order not found.")
    if not order.is_visible_to(user):
        raise Forbidden("You are not allowed to see this order.")

    return OrderFetchedResponse(fetched_order=OrderResponse.from_order(order))


# TODO: require an admin session once the admin dashboard sends its session cookie.
@order_router.patch("/{order_id}", response_model=ShipmentResponse)
async def toggle_shipment(order_id: str) -> ShipmentResponse:
    is_shipped = current_domain.process(ToggleShipment(order_id=order_id), asynchronous=False)
    message = "Order shipped successfully." if is_shipped else "Order has been unshipped."
    return ShipmentResponse(message=message, status=is_shipped)
