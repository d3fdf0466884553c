"""FastAPI application entry point for CardShield."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware.error_handler import (
    global_exception_handler,
    transaction_validation_handler,
)
from src.api.middleware.logging import StructuredLoggingMiddleware
from src.api.routes.fraud import router as fraud_router
from src.api.routes.health import router as health_router
from src.api.routes.history import router as history_router
from src.api.routes.reference import router as reference_router
from src.config import settings
from src.domains.fraud.config import FraudConfig
from src.domains.fraud.exceptions import TransactionValidationError
from src.domains.fraud.registry import ScorerRegistry
from src.shared.logging import setup_logging

logger = structlog.get_logger()

# Track app start time for uptime calculation
APP_START_TIME: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown logic."""
    global APP_START_TIME
    APP_START_TIME = time.time()
    setup_logging(settings.log_level, json_output=settings.log_json)

    logger.info(
        "cardshield_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )

    if settings.create_tables_on_startup:
        from src.db.database import init_db

        try:
            await init_db()
        except Exception:
            # Scoring works without the store; saves will report a warning
            logger.warning("database_init_failed", exc_info=True)

    yield

    logger.info("cardshield_shutting_down", account_count=len(app.state.scorer_registry))

    from src.db.database import dispose_db

    await dispose_db()


app = FastAPI(
    title="CardShield",
    description="Rule-based card transaction fraud scoring",
    version=settings.app_version,
    lifespan=lifespan,
)

# Per-account scorers; owned by the app, never shared across accounts
app.state.scorer_registry = ScorerRegistry(config=FraudConfig.from_env())

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Structured logging middleware
app.add_middleware(StructuredLoggingMiddleware)

app.add_exception_handler(TransactionValidationError, transaction_validation_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(fraud_router)
app.include_router(history_router)
app.include_router(reference_router)


def get_uptime() -> int:
    """Get application uptime in seconds."""
    if APP_START_TIME == 0.0:
        return 0
    return int(time.time() - APP_START_TIME)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host=settings.host, port=settings.port, reload=settings.debug)
