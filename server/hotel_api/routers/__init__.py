"""FastAPI routers package."""

from .hotels import router as hotels_router
from .metrics import router as metrics_router

__all__ = [
    "hotels_router",
    "metrics_router",
]
