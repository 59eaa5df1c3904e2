"""Expense Tracker API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExpenseTrackerError -> {code, data, message, success}
    - CORS configured from settings (not hardcoded)
    - MongoDB connected once on startup via the lifespan; a failed connect aborts startup
    - The connection manager lives on app.state and is closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Eager connect at startup: the process never serves requests against a dead store
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expense_tracker.api.error_handlers import register_error_handlers
from expense_tracker.api.middleware import register_request_logging
from expense_tracker.api.routes import categories, expenses, health, projects, users
from expense_tracker.config import get_settings
from expense_tracker.core.errors import StorageUnavailableError
from expense_tracker.infrastructure.connection import MongoConnectionManager
from expense_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = MongoConnectionManager(
        settings.mongo_uri,
        settings.mongo_database,
        server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        operation_timeout_ms=settings.mongo_operation_timeout_ms,
    )
    try:
        await manager.get_connection()
    except StorageUnavailableError as e:
        logger.critical(f"Failed to connect to the database: {e.message}")
        raise
    app.state.connection_manager = manager
    logger.info(f"Expense Tracker API started ({settings.server_mode})")
    yield
    logger.info("Expense Tracker API shutting down")
    await manager.close()


app = FastAPI(
    title="Expense Tracker API", version="1.0.0", lifespan=lifespan,
)

# CORS - configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app)

# Routes - explicit registration
app.include_router(health.router)
app.include_router(users.router)
app.include_router(categories.router)
app.include_router(projects.router)
app.include_router(expenses.router)

register_error_handlers(app)


if __name__ == "__main__":
    uvicorn.run(
        "expense_tracker.main:app", host="0.0.0.0", port=8000,
        reload=not settings.is_production,
    )
