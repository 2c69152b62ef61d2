"""API route modules."""

from eventmail.api.demo import router as demo_router
from eventmail.api.parse import router as parse_router
from eventmail.api.webhook import router as webhook_router

__all__ = ["demo_router", "parse_router", "webhook_router"]
