"""API route modules."""

from quotesync.api.routes.health import router as health_router
from quotesync.api.routes.sync import router as sync_router

__all__ = [
    "health_router",
    "sync_router",
]
