import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from product_api.config import Settings
from product_api.database import Database
from product_api.middleware import log_requests
from product_api.routers import health_check, products
from product_api.schemas import validation_message
from product_api.store import ProductStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings, database: Optional[Database] = None) -> FastAPI:
    """Build the API wired to a single database handle.

    The handle is opened on startup and closed on shutdown; pass one in to
    control how it connects.
    """
    if database is None:
        database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.connect()
        try:
            yield
        finally:
            database.close()

    app = FastAPI(title="Product Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.product_store = ProductStore(database)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": validation_message(exc.errors())})

    app.include_router(products.router, prefix="/api")
    app.include_router(health_check.router, prefix="/api")

    return app
