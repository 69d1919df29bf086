"""Application tracker model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careerpilot.core.storage import Base
from careerpilot.models.common import new_id, utc_now
from careerpilot.models.job import JobPosting


class ApplicationRecord(Base):
    """Model for a user's tracked application to one job posting.

    ``job_id`` is a plain reference without a foreign key constraint: deleting
    the job leaves the record in place and ``job`` then loads as ``None``.
    """

    __tablename__ = "job_applications"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    job_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="saved")

    applied_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    response_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    interview_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    interview_time: Mapped[str | None] = mapped_column(String(50), nullable=True)
    interview_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    interview_location: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )

    job: Mapped[JobPosting | None] = relationship(
        JobPosting,
        primaryjoin="foreign(ApplicationRecord.job_id) == JobPosting.id",
        viewonly=True,
        lazy="raise",
    )
