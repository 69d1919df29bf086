"""Analytics aggregation over tracked applications.

Everything here is pure: callers fetch records (with their jobs joined) and
pass ``now`` explicitly, so results depend only on the inputs.
"""

import calendar
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from careerpilot.core.exceptions import ValidationError
from careerpilot.schemas.analytics import (
    AnalyticsMetrics,
    AnalyticsSummary,
    CompanyStats,
    MonthlyTrend,
    StatusDistribution,
)
from careerpilot.services.transitions import ApplicationStatus

RANGE_DAYS = {"7d": 7, "30d": 30, "90d": 90}
RANGE_TAGS = (*RANGE_DAYS, "ytd", "all")

# "100,000", "95000", "120.5" with an optional "k" multiplier
_SALARY_NUMBER = re.compile(r"(\d[\d,]*(?:\.\d+)?)\s*([kK])?")


@dataclass(frozen=True)
class DateWindow:
    """Half-open ``[start, end)`` range; ``None`` means unbounded."""

    start: datetime | None = None
    end: datetime | None = None

    def contains(self, moment: datetime | None) -> bool:
        if moment is None:
            return False
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment >= self.end:
            return False
        return True


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves away from zero, unlike the builtin banker's rounding."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def percent(part: int, whole: int) -> int:
    """Integer percentage of ``part`` in ``whole``; 0 for an empty whole."""
    if whole <= 0:
        return 0
    return int(round_half_up(100 * part / whole))


def resolve_window(range_tag: str, now: datetime) -> DateWindow:
    """Translate a relative range tag into a date window ending at ``now``."""
    if range_tag in RANGE_DAYS:
        return DateWindow(start=now - timedelta(days=RANGE_DAYS[range_tag]))
    if range_tag == "ytd":
        return DateWindow(start=datetime(now.year, 1, 1))
    if range_tag == "all":
        return DateWindow()
    raise ValidationError(
        f"Invalid range '{range_tag}', expected one of: {', '.join(RANGE_TAGS)}"
    )


def parse_salary(text: str | None) -> float | None:
    """Best-effort numeric value of a free-text salary.

    A range yields the midpoint of its first two numbers, a single number
    yields itself, and text without digits yields ``None``.
    """
    if not text:
        return None

    numbers = []
    for digits, suffix in _SALARY_NUMBER.findall(text):
        value = float(digits.replace(",", ""))
        if suffix:
            value *= 1000
        numbers.append(value)

    if len(numbers) >= 2:
        return (numbers[0] + numbers[1]) / 2
    if numbers:
        return numbers[0]
    return None


def average_salary(jobs: Iterable[Any]) -> int | None:
    """Mean parsed salary over jobs that have one, or ``None``."""
    values = [
        value
        for value in (parse_salary(getattr(job, "salary", None)) for job in jobs)
        if value is not None and value > 0
    ]
    if not values:
        return None
    return int(round_half_up(sum(values) / len(values)))


def average_response_days(records: Iterable[Any]) -> float:
    """Mean days from applying to hearing back, one decimal place."""
    durations = [
        (record.response_date - record.applied_date).total_seconds() / 86400
        for record in records
        if record.applied_date is not None and record.response_date is not None
    ]
    if not durations:
        return 0
    return round_half_up(sum(durations) / len(durations), 1)


def status_distribution(records: Sequence[Any]) -> StatusDistribution:
    counts = {status.value: 0 for status in ApplicationStatus}
    for record in records:
        if record.status in counts:
            counts[record.status] += 1
    return StatusDistribution(**counts)


def _month_start(year: int, month: int, offset: int) -> datetime:
    index = year * 12 + (month - 1) + offset
    return datetime(index // 12, index % 12 + 1, 1)


def monthly_trend(
    records: Sequence[Any], now: datetime, months: int = 6
) -> list[MonthlyTrend]:
    """Per-month activity for the trailing ``months`` months, oldest first.

    Applications are bucketed by ``created_at`` while interviews and offers
    are bucketed by ``updated_at``.
    """
    trend = []
    for offset in range(months - 1, -1, -1):
        start = _month_start(now.year, now.month, -offset)
        bucket = DateWindow(start=start, end=_month_start(start.year, start.month, 1))

        trend.append(
            MonthlyTrend(
                month=calendar.month_abbr[start.month],
                year=start.year,
                applications=sum(1 for r in records if bucket.contains(r.created_at)),
                interviews=sum(
                    1
                    for r in records
                    if r.status == ApplicationStatus.INTERVIEWING.value
                    and bucket.contains(r.updated_at)
                ),
                offers=sum(
                    1
                    for r in records
                    if r.status == ApplicationStatus.OFFER.value
                    and bucket.contains(r.updated_at)
                ),
            )
        )
    return trend


def top_companies(records: Sequence[Any], limit: int = 5) -> list[CompanyStats]:
    """Companies with the most applications, ties kept in first-seen order."""
    groups: dict[str, dict[str, int]] = {}
    for record in records:
        job = getattr(record, "job", None)
        company = getattr(job, "company", None) if job is not None else None
        if not company:
            continue

        stats = groups.setdefault(
            company, {"applications": 0, "interviews": 0, "offers": 0}
        )
        stats["applications"] += 1
        if record.status == ApplicationStatus.INTERVIEWING.value:
            stats["interviews"] += 1
        elif record.status == ApplicationStatus.OFFER.value:
            stats["offers"] += 1

    ranked = sorted(groups.items(), key=lambda item: -item[1]["applications"])
    return [
        CompanyStats(
            name=name,
            success_rate=percent(stats["offers"], stats["applications"]),
            **stats,
        )
        for name, stats in ranked[:limit]
    ]


def summarize(
    records: Iterable[Any],
    window: DateWindow,
    now: datetime,
    top_companies_limit: int = 5,
    trend_months: int = 6,
) -> AnalyticsSummary:
    """Build the analytics payload for records created inside ``window``."""
    scoped = [record for record in records if window.contains(record.created_at)]

    distribution = status_distribution(scoped)
    total = len(scoped)
    jobs = [record.job for record in scoped if getattr(record, "job", None) is not None]

    metrics = AnalyticsMetrics(
        total_applications=total,
        interview_rate=percent(distribution.interviewing, total),
        offer_rate=percent(distribution.offer, total),
        average_response_time=average_response_days(scoped),
        average_salary=average_salary(jobs),
    )

    return AnalyticsSummary(
        metrics=metrics,
        status_distribution=distribution,
        monthly_data=monthly_trend(scoped, now, months=trend_months),
        top_companies=top_companies(scoped, limit=top_companies_limit),
    )
