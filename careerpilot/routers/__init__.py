"""API routers."""

from careerpilot.routers.analytics import router as analytics_router
from careerpilot.routers.dashboard import router as dashboard_router
from careerpilot.routers.jobs import router as jobs_router
from careerpilot.routers.tracker import router as tracker_router

__all__ = ["analytics_router", "dashboard_router", "jobs_router", "tracker_router"]
