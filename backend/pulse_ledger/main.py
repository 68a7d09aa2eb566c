"""Pulse Ledger API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Ledger reinitialized to a single genesis block on every startup (no persistence)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pulse_ledger.api.error_handlers import register_error_handlers
from pulse_ledger.api.routes import chain, health
from pulse_ledger.config import get_settings
from pulse_ledger.infrastructure.ledger_handle import init_ledger
from pulse_ledger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_ledger(genesis_payload=settings.genesis_payload)
    logger.info("Pulse Ledger API started")
    yield
    logger.info("Pulse Ledger API shutting down")


app = FastAPI(
    title="Pulse Ledger API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(chain.router)

register_error_handlers(app)
