"""Date bucketed aggregation over a user's entities.

Pure functions: callers load the entities and pass the reference time in,
which keeps every calculation here deterministic.
"""

import math
from collections.abc import Iterable, Sequence
from datetime import UTC, date, datetime, time, timedelta

from app.features.analytics.dtos import (
    DashboardSummary,
    PerformanceBucket,
    PerformancePeriod,
)
from app.features.entities.models import Entity, EntityStatus


class InvalidDateError(ValueError):
    """Raised when a query date cannot be parsed."""

    def __init__(self, value: str | None):
        super().__init__(f"Invalid date format: {value!r}")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves towards positive infinity (not banker's rounding)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def parse_date_bound(value: str | None, *, end_of_day: bool = False) -> datetime:
    """Parse a query string date or datetime into an aware UTC datetime.

    A bare `YYYY-MM-DD` is midnight UTC, or the last instant of that day when
    `end_of_day` is set, so a date-only range covers its final day entirely.

    Raises:
        InvalidDateError: if the value is missing or not ISO 8601
    """
    if not value or not value.strip():
        raise InvalidDateError(value)

    raw = value.strip()
    try:
        if len(raw) == 10:
            day = date.fromisoformat(raw)
            bound = time.max if end_of_day else time.min
            return datetime.combine(day, bound, tzinfo=UTC)
        return as_utc(datetime.fromisoformat(raw))
    except ValueError as e:
        raise InvalidDateError(value) from e


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def summarize_dashboard(entities: Sequence[Entity], now: datetime) -> DashboardSummary:
    """Compute the dashboard summary.

    `trend` is the percent change in entities created this calendar month
    versus the previous one. It is 0 when the previous month had none, which
    also covers the case of no history at all.
    """
    total = len(entities)
    active = sum(1 for entity in entities if entity.status == EntityStatus.ACTIVE)
    total_views = sum(entity.views or 0 for entity in entities)

    avg_engagement = 0.0
    if total:
        engagement_sum = sum(entity.engagement or 0 for entity in entities)
        avg_engagement = round_half_up(engagement_sum / total, 1)

    now = as_utc(now)
    this_month = (now.year, now.month)
    last_month = _previous_month(now.year, now.month)

    this_month_count = 0
    last_month_count = 0
    for entity in entities:
        created = as_utc(entity.created_at)
        key = (created.year, created.month)
        if key == this_month:
            this_month_count += 1
        elif key == last_month:
            last_month_count += 1

    trend = 0
    if last_month_count > 0:
        change = (this_month_count - last_month_count) / last_month_count * 100
        trend = int(round_half_up(change))

    return DashboardSummary(
        total_entities=total,
        active_entities=active,
        avg_engagement=avg_engagement,
        total_views=total_views,
        trend=trend,
    )


def bucket_key(created_at: datetime, period: PerformancePeriod) -> str:
    """Date key of the bucket an entity created at `created_at` falls in.

    - daily: the calendar date, `YYYY-MM-DD`
    - weekly: the Sunday starting that week, `YYYY-MM-DD`
    - monthly: `YYYY-MM`
    """
    day = as_utc(created_at).date()

    if period is PerformancePeriod.WEEKLY:
        # date.weekday() is 0 for Monday; shift so Sunday is 0
        days_since_sunday = (day.weekday() + 1) % 7
        return (day - timedelta(days=days_since_sunday)).isoformat()

    if period is PerformancePeriod.MONTHLY:
        return f"{day.year:04d}-{day.month:02d}"

    return day.isoformat()


def aggregate_performance(
    entities: Iterable[Entity], period: PerformancePeriod
) -> list[PerformanceBucket]:
    """Group entities into date buckets and total their metrics.

    Only buckets containing at least one entity are returned (the series is
    sparse), sorted ascending by date key.
    """
    buckets: dict[str, PerformanceBucket] = {}

    for entity in entities:
        key = bucket_key(entity.created_at, period)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = PerformanceBucket(date=key, entities=0, views=0, engagement=0)
            buckets[key] = bucket

        bucket.entities += 1
        bucket.views += entity.views or 0
        bucket.engagement += entity.engagement or 0

    return [buckets[key] for key in sorted(buckets)]
