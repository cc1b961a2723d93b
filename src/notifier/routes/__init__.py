"""
Notifier API Routes

FastAPI route handlers for the notifier service.
"""
from .health import router as health_router
from .messages import router as messages_router

__all__ = [
    'health_router',
    'messages_router',
]
