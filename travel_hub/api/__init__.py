# API endpoints and routers

from .groups_endpoints import router as groups_router
from .members_endpoints import router as members_router
from .bookings_endpoints import router as bookings_router
from .analytics_endpoints import router as analytics_router

__all__ = [
    "groups_router",
    "members_router",
    "bookings_router",
    "analytics_router",
]
