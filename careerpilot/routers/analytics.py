"""API routes for analytics."""

from fastapi import APIRouter, Depends, Query

from careerpilot.core.auth import CurrentUser, get_current_user
from careerpilot.core.config import AnalyticsRange, settings
from careerpilot.schemas.analytics import (
    AnalyticsSummary,
    ExportAcknowledgement,
    ExportDownload,
    ExportRequest,
)
from careerpilot.schemas.common import ApiResponse
from careerpilot.services.analytics_service import (
    AnalyticsService,
    get_analytics_service,
)

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=ApiResponse[AnalyticsSummary])
async def get_analytics(
    range: AnalyticsRange = Query(
        default=settings.default_analytics_range, description="Date range"
    ),
    user: CurrentUser = Depends(get_current_user),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Analytics for applications created within the range."""
    summary = await service.get_summary(user.id, range)
    return ApiResponse(data=summary)


@router.post("/export", response_model=ApiResponse[ExportAcknowledgement])
async def export_analytics(
    request: ExportRequest = ExportRequest(),
    range: AnalyticsRange = Query(default=settings.default_analytics_range),
    user: CurrentUser = Depends(get_current_user),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Request an export of the analytics data."""
    ack = await service.request_export(user.id, range, request.format)
    return ApiResponse(data=ack)


@router.get("/download/{export_id}", response_model=ApiResponse[ExportDownload])
async def download_export(
    export_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Follow the download link handed out by an export request."""
    return ApiResponse(data=service.get_export(user.id, export_id))
