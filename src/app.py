"""Storefront FastAPI application.

Serves the catalog and order endpoints the browser client talks to. Every
request runs inside the storefront domain context; sessions are read from a
signed cookie shared with the sign-in service.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from starlette.middleware.sessions import SessionMiddleware

from storefront.domain import storefront
from storefront.errors import register_error_handlers
from storefront.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

storefront.init()

SESSION_SECRET = os.getenv("STOREFRONT_SESSION_SECRET", "storefront-dev-secret")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("STOREFRONT_CORS_ORIGINS", "*").split(",") if origin.strip()]


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Catalog, checkout and order management",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET, same_site="lax")

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and bind request logging context."""
        add_context(method=request.method, path=request.url.path)
        try:
            if request.url.path.startswith("/api/"):
                with storefront.domain_context():
                    return await call_next(request)
            return await call_next(request)
        finally:
            clear_context()

    from storefront.api import order_router, product_router

    app.include_router(product_router)
    app.include_router(order_router)

    register_exception_handlers(app)
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app


app = create_app()
