"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventmail import __version__
from eventmail.api.demo import router as demo_router
from eventmail.api.dependencies import get_history
from eventmail.api.parse import router as parse_router
from eventmail.api.webhook import router as webhook_router
from eventmail.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

SERVICE_NAME = "SF Moms Event Parser"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Log resolved configuration at startup for debugging."""
    s = get_settings()
    logger.info("%s starting: history_size=%d", SERVICE_NAME, s.history_size)
    if s.smtp_host:
        logger.info("Reply email via %s:%d (secure=%s)", s.smtp_host, s.smtp_port, s.smtp_secure)
    else:
        logger.warning("SMTP NOT CONFIGURED, replies will not be emailed")
    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Parses pasted event announcements into structured events",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(webhook_router)
app.include_router(parse_router)
app.include_router(demo_router)


@app.get("/")
async def root() -> dict[str, Any]:
    """Return service information and the endpoint map."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": __version__,
        "endpoints": {
            "POST /webhook/zapier": "Receive email from Zapier and parse events",
            "POST /api/parse": "Parse event text directly",
            "GET /api/events": "List recently processed events",
        },
    }


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint with transport and history status."""
    s = get_settings()
    return {
        "status": "ok",
        "smtp": "configured" if s.smtp_host else "not configured",
        "history_size": len(get_history()),
    }
