"""API routes for the application tracker."""

from fastapi import APIRouter, Depends, status

from careerpilot.core.auth import CurrentUser, get_current_user
from careerpilot.schemas.common import ApiResponse
from careerpilot.schemas.tracker import (
    ApplicationResponse,
    CreateApplicationRequest,
    TrackerBoard,
    UpdateDetailsRequest,
    UpdateStatusRequest,
)
from careerpilot.services.tracker_service import TrackerService, get_tracker_service

router = APIRouter(prefix="/tracker", tags=["tracker"])


@router.get("", response_model=ApiResponse[TrackerBoard])
async def get_applications(
    user: CurrentUser = Depends(get_current_user),
    service: TrackerService = Depends(get_tracker_service),
):
    """List the caller's applications grouped by status."""
    board = await service.list(user.id)
    return ApiResponse(data=board)


@router.post(
    "",
    response_model=ApiResponse[ApplicationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_application(
    request: CreateApplicationRequest,
    user: CurrentUser = Depends(get_current_user),
    service: TrackerService = Depends(get_tracker_service),
):
    """Start tracking a job."""
    record = await service.create(user.id, request.job_id, request.status)
    return ApiResponse(data=ApplicationResponse.model_validate(record))


@router.put("/{application_id}", response_model=ApiResponse[ApplicationResponse])
async def update_application_status(
    application_id: str,
    request: UpdateStatusRequest,
    user: CurrentUser = Depends(get_current_user),
    service: TrackerService = Depends(get_tracker_service),
):
    """Move an application to another status."""
    record = await service.update_status(user.id, application_id, request.status)
    return ApiResponse(data=ApplicationResponse.model_validate(record))


@router.patch("/{application_id}", response_model=ApiResponse[ApplicationResponse])
async def update_application_details(
    application_id: str,
    request: UpdateDetailsRequest,
    user: CurrentUser = Depends(get_current_user),
    service: TrackerService = Depends(get_tracker_service),
):
    """Update interview scheduling, notes or salary."""
    record = await service.update_details(
        user.id, application_id, request.model_dump(exclude_unset=True)
    )
    return ApiResponse(data=ApplicationResponse.model_validate(record))


@router.delete("/{application_id}", response_model=ApiResponse[dict])
async def delete_application(
    application_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: TrackerService = Depends(get_tracker_service),
):
    """Stop tracking an application."""
    await service.delete(user.id, application_id)
    return ApiResponse(data={})
