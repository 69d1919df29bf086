"""Database models."""

from careerpilot.models.application import ApplicationRecord
from careerpilot.models.job import JobPosting

__all__ = ["ApplicationRecord", "JobPosting"]
