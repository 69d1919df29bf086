"""Schemas for the dashboard."""

from datetime import datetime

from pydantic import Field

from careerpilot.schemas.common import CamelModel


class StatCard(CamelModel):
    """One dashboard card with period-over-period change."""

    title: str
    value: int
    change: int = Field(description="Percent change against the previous period")
    icon: str
    color: str


class RecentApplication(CamelModel):
    id: str
    company: str
    position: str
    status: str
    date: datetime
    logo: str


class UpcomingInterview(CamelModel):
    id: str
    company: str
    position: str
    date: datetime | None
    time: str
    type: str


class DashboardData(CamelModel):
    """Payload for the dashboard page."""

    stats: list[StatCard] = Field(default_factory=list)
    recent_applications: list[RecentApplication] = Field(default_factory=list)
    upcoming_interviews: list[UpcomingInterview] = Field(default_factory=list)


class QuickStats(CamelModel):
    applications: int = 0
    jobs: int = 0
    interviews: int = 0
