"""API routes for the dashboard."""

from fastapi import APIRouter, Depends

from careerpilot.core.auth import CurrentUser, get_current_user
from careerpilot.schemas.common import ApiResponse
from careerpilot.schemas.dashboard import DashboardData, QuickStats
from careerpilot.services.dashboard_service import (
    DashboardService,
    get_dashboard_service,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=ApiResponse[DashboardData])
async def get_dashboard(
    user: CurrentUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Stat cards, recent applications and upcoming interviews."""
    return ApiResponse(data=await service.get_dashboard(user.id))


@router.get("/quick-stats", response_model=ApiResponse[QuickStats])
async def get_quick_stats(
    user: CurrentUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    return ApiResponse(data=await service.get_quick_stats(user.id))
