"""
API Routes.
"""

from .comment_routes import router as comment_router
from .health_routes import create_health_routes
from .label_routes import router as label_router
from .task_routes import router as task_router

__all__ = [
    "create_health_routes",
    "task_router",
    "comment_router",
    "label_router",
]
