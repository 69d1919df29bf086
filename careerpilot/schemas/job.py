"""Schemas for job postings."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from careerpilot.schemas.common import CamelModel

JobType = Literal["Full-time", "Part-time", "Contract", "Remote", "Hybrid"]
ExperienceLevel = Literal["Entry Level", "Mid Level", "Senior Level"]


class JobCreateRequest(CamelModel):
    """Request to post a new job."""

    title: str = Field(..., max_length=100, description="Job title")
    company: str = Field(..., max_length=100, description="Company name")
    location: str = Field(..., description="Job location")
    salary: str = Field(default="", description="Salary text, e.g. '$90,000'")
    type: JobType = Field(..., description="Employment type")
    experience: ExperienceLevel = Field(..., description="Experience level")
    description: str = Field(..., max_length=2000, description="Job description")
    skills: str | list[str] | None = Field(
        default=None, description="Skills as a list or comma-separated string"
    )


class JobUpdateRequest(CamelModel):
    """Partial update of a job posting."""

    title: str | None = Field(default=None, max_length=100)
    company: str | None = Field(default=None, max_length=100)
    location: str | None = None
    salary: str | None = None
    type: JobType | None = None
    experience: ExperienceLevel | None = None
    description: str | None = Field(default=None, max_length=2000)
    skills: str | list[str] | None = None


class JobSummary(CamelModel):
    """Job fields joined into application responses."""

    id: str
    title: str
    company: str
    location: str
    salary: str = ""
    type: str
    experience: str


class JobResponse(JobSummary):
    """Full job posting."""

    description: str
    skills: list[str] = Field(default_factory=list)
    posted_by: str
    logo: str = ""
    saved_by: list[str] = Field(default_factory=list)
    created_at: datetime

