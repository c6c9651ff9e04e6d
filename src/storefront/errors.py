"""Storefront errors carrying an HTTP status and a human-readable message."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError

from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ARCHIVED_PRODUCT_MESSAGE = "One of the products you have in your cart is archived."
OUT_OF_STOCK_MESSAGE = "One of the products you have in your cart is out of stock."
INVALID_ADDRESS_MESSAGE = "Your address is not in the correct format."
INVALID_ITEMS_MESSAGE = "Something wrong with the products in your order."
INVALID_USER_ID_MESSAGE = "Something wrong with your user id."
CONFLICT_MESSAGE = "This record was changed by someone else. Please reload and try again."


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class InvalidOrder(StorefrontError):
    """Raised when an order payload fails address, item or user validation."""

    status_code = 400


class NotAuthenticated(StorefrontError):
    status_code = 401


class NotAuthorized(StorefrontError):
    """Raised when the session user may not perform the operation."""

    status_code = 401


class Forbidden(StorefrontError):
    status_code = 403


class ResourceNotFound(StorefrontError):
    status_code = 404


class ArchivedProductInCart(StorefrontError):
    status_code = 409

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(ARCHIVED_PRODUCT_MESSAGE)


class ProductOutOfStock(StorefrontError):
    status_code = 409

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(OUT_OF_STOCK_MESSAGE)


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def version_conflict_handler(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("version_conflict", method=request.method, path=request.url.path, error=str(exc))
    # On checkout the only aggregates written from snapshots are products
    if request.method == "POST" and request.url.path.rstrip("/") == "/api/orders":
        message = OUT_OF_STOCK_MESSAGE
    else:
        message = CONFLICT_MESSAGE
    return JSONResponse(status_code=409, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(ExpectedVersionError, version_conflict_handler)
