from .app_factory import create_app
from .health_router import router as health_router
from .tasks_router import router as tasks_router

__all__ = ["create_app", "health_router", "tasks_router"]
