"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers call application use cases
and map their results onto HTTP status codes and bodies.
"""

from .cart_health_controller import router as cart_health_router
from .health_controller import router as health_router

__all__ = ["cart_health_router", "health_router"]
