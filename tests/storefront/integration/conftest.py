import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from storefront.api import order_router, product_router
from storefront.errors import register_error_handlers
from storefront.session.session import SessionUser, get_session_user


@pytest.fixture()
def app():
    app = FastAPI()
    app.include_router(product_router)
    app.include_router(order_router)
    register_exception_handlers(app)
    register_error_handlers(app)
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def sign_in(app):
    """Pretend a session exists for the given user."""

    def _sign_in(user_id="user-001", is_admin=False):
        user = SessionUser(id=user_id, is_admin=is_admin)
        app.dependency_overrides[get_session_user] = lambda: user
        return user

    yield _sign_in
    app.dependency_overrides.clear()
