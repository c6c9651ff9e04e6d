import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from storefront.api import order_router, product_router
from storefront.client import Storefront
from storefront.errors import register_error_handlers
from storefront.session.session import SessionUser, get_session_user


@pytest.fixture()
def app():
    app = FastAPI()
    app.include_router(product_router)
    app.include_router(order_router)
    register_exception_handlers(app)
    register_error_handlers(app)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture()
def shop(app):
    return Storefront(http=TestClient(app))


@pytest.fixture()
def as_admin(app, shop):
    """Sign the client in as an admin, on both sides of the wire."""
    app.dependency_overrides[get_session_user] = lambda: SessionUser(id="admin-001", is_admin=True)
    shop.auth.sign_in_as_admin("admin-001")
    return shop


@pytest.fixture()
def as_user(app, shop):
    app.dependency_overrides[get_session_user] = lambda: SessionUser(id="user-001")
    shop.auth.sign_in_as_user("user-001")
    return shop
