"""Application configuration management."""

from typing import Literal

from pydantic import AnyUrl, ConfigDict, Field
from pydantic_settings import BaseSettings

AnalyticsRange = Literal["7d", "30d", "90d", "ytd", "all"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: AnyUrl = AnyUrl("sqlite+aiosqlite:///./careerpilot.db")
    database_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    # Authentication is done upstream; the gateway forwards the verified identity
    user_id_header: str = "X-User-Id"
    user_role_header: str = "X-User-Role"

    # Analytics
    default_analytics_range: AnalyticsRange = "30d"
    top_companies_limit: int = Field(default=5, ge=1, le=50)
    trend_months: int = Field(default=6, ge=1, le=24)

    # Dashboard
    dashboard_window_days: int = Field(default=30, ge=1, le=365)
    upcoming_interview_days: int = Field(default=7, ge=1, le=90)
    recent_applications_limit: int = Field(default=5, ge=1, le=50)

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
