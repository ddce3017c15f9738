"""Customer Inquiry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map failures → {message, error} JSON responses
    - CORS configured from settings (not hardcoded)
    - Record store selected and initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Store lives on app.state, not in a module global: routes read it per request
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from customer_inquiry.api.error_handlers import register_error_handlers
from customer_inquiry.api.routes import customers, health
from customer_inquiry.config import Settings, get_settings
from customer_inquiry.core.domain_types import StoreBackend
from customer_inquiry.core.repository_protocols import CustomerStore
import customer_inquiry.infrastructure.database as database
from customer_inquiry.infrastructure.customer_stores import (
    InMemoryCustomerStore, SqlCustomerStore,
)
from customer_inquiry.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_customer_store(settings: Settings) -> CustomerStore:
    """Create the configured store; the SQL store also initializes the engine."""
    if settings.store_backend is StoreBackend.MEMORY:
        return InMemoryCustomerStore()
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    return SqlCustomerStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.customer_store = build_customer_store(settings)
    logger.info(
        f"Customer Inquiry API started (store={settings.store_backend.value})",
    )
    yield
    if database.db_manager is not None:
        await database.db_manager.dispose()
    logger.info("Customer Inquiry API shutting down")


app = FastAPI(
    title="Customer Inquiry API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=[customers.REQUEST_ID_HEADER],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(customers.router)

register_error_handlers(app)
