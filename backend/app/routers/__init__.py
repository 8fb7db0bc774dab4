from .auth import router as auth_router
from .assignments import router as assignments_router
from .classes import router as classes_router
from .dashboard import router as dashboard_router
from .attachments import router as attachments_router
from .availability import router as availability_router
from .cron import router as cron_router
from .health import router as health_router
from .tutor import router as tutor_router

__all__ = [
    "auth_router", "assignments_router", "classes_router", "dashboard_router",
    "attachments_router", "availability_router", "cron_router", "health_router",
    "tutor_router",
]
