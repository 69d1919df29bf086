"""Pydantic schemas for request/response validation."""

from careerpilot.schemas.common import ApiResponse
from careerpilot.schemas.tracker import (
    ApplicationResponse,
    CreateApplicationRequest,
    TrackerBoard,
    UpdateDetailsRequest,
    UpdateStatusRequest,
)

__all__ = [
    "ApiResponse",
    "ApplicationResponse",
    "CreateApplicationRequest",
    "TrackerBoard",
    "UpdateDetailsRequest",
    "UpdateStatusRequest",
]
