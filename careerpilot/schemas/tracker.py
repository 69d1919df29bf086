"""Schemas for the application tracker."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from careerpilot.models.common import to_naive_utc
from careerpilot.schemas.common import CamelModel
from careerpilot.schemas.job import JobSummary

InterviewType = Literal[
    "Phone", "Technical", "Behavioral", "Culture Fit", "On-site", "Other"
]


class CreateApplicationRequest(CamelModel):
    """Request to start tracking a job."""

    job_id: str = Field(..., min_length=1, description="Job posting ID")
    # Checked against the pipeline by the transition engine
    status: str | None = Field(default=None, description="Initial status")


class UpdateStatusRequest(CamelModel):
    """Request to move an application to another status."""

    status: str = Field(..., description="Target status")


class UpdateDetailsRequest(CamelModel):
    """Scheduling metadata and notes, independent of status."""

    interview_date: datetime | None = None
    interview_time: str | None = Field(default=None, max_length=50)
    interview_type: InterviewType | None = None
    interview_location: str | None = Field(default=None, max_length=255)
    notes: str | None = None
    salary: int | None = Field(default=None, ge=0)

    @field_validator("interview_date")
    @classmethod
    def interview_date_to_utc(cls, value: datetime | None) -> datetime | None:
        """Store interview times as naive UTC like every other timestamp."""
        return to_naive_utc(value) if value is not None else None


class ApplicationResponse(CamelModel):
    """Tracked application with its job joined."""

    id: str
    user_id: str
    job_id: str
    status: str
    applied_date: datetime | None = None
    response_date: datetime | None = None
    salary: int | None = None
    notes: str | None = None
    interview_date: datetime | None = None
    interview_time: str | None = None
    interview_type: str | None = None
    interview_location: str | None = None
    created_at: datetime
    updated_at: datetime
    job: JobSummary | None = None


class TrackerBoard(CamelModel):
    """Applications partitioned by status for the kanban view."""

    saved: list[ApplicationResponse] = Field(default_factory=list)
    applied: list[ApplicationResponse] = Field(default_factory=list)
    interviewing: list[ApplicationResponse] = Field(default_factory=list)
    offer: list[ApplicationResponse] = Field(default_factory=list)
    rejected: list[ApplicationResponse] = Field(default_factory=list)
