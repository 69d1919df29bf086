"""Schemas for analytics output."""

from typing import Literal

from pydantic import Field

from careerpilot.schemas.common import CamelModel

ExportFormat = Literal["csv", "excel", "json", "pdf"]


class AnalyticsMetrics(CamelModel):
    """Headline numbers."""

    total_applications: int = 0
    interview_rate: int = Field(default=0, description="Percent, 0-100")
    offer_rate: int = Field(default=0, description="Percent, 0-100")
    average_response_time: float = Field(default=0, description="Days")
    average_salary: int | None = Field(
        default=None, description="None when no job salary could be parsed"
    )


class StatusDistribution(CamelModel):
    """Record counts per status."""

    saved: int = 0
    applied: int = 0
    interviewing: int = 0
    offer: int = 0
    rejected: int = 0


class MonthlyTrend(CamelModel):
    """Activity for one calendar month."""

    month: str
    year: int
    applications: int = 0
    interviews: int = 0
    offers: int = 0


class CompanyStats(CamelModel):
    """Per-company rollup."""

    name: str
    applications: int = 0
    interviews: int = 0
    offers: int = 0
    success_rate: int = 0


class AnalyticsSummary(CamelModel):
    """Full analytics payload."""

    metrics: AnalyticsMetrics
    status_distribution: StatusDistribution
    monthly_data: list[MonthlyTrend] = Field(default_factory=list)
    top_companies: list[CompanyStats] = Field(default_factory=list)


class ExportRequest(CamelModel):
    """Request to export analytics."""

    format: ExportFormat = "csv"


class ExportAcknowledgement(CamelModel):
    """Acknowledgement returned for an export request."""

    export_id: str
    format: ExportFormat
    range: str
    total_applications: int
    message: str
    download_url: str


class ExportDownload(CamelModel):
    """Status of a previously requested export."""

    export_id: str
    message: str
