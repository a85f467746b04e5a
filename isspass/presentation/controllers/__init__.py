"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests onto application use cases and
domain failures onto HTTP status codes.
"""

from .passes_controller import router as passes_router
from .system_controller import router as system_router

__all__ = ["passes_router", "system_router"]
