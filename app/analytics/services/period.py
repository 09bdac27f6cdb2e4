"""Resolution of period selectors into inclusive analysis windows."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum

import structlog

from app.core.config import settings
from app.core.datetime_utils import END_OF_DAY, parse_day, to_naive_utc
from app.core.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class PeriodKeyword(str, Enum):
    """Preset analysis periods understood by the resolver."""

    LAST_7_DAYS = "last7days"
    LAST_30_DAYS = "last30days"
    THIS_MONTH = "thisMonth"
    LAST_6_MONTHS = "last6months"
    LAST_12_MONTHS = "last12months"


@dataclass(frozen=True)
class Period:
    """Closed window from 00:00:00.000 on the first day to 23:59:59.999 on the last."""

    start_date: datetime
    end_date: datetime

    def __post_init__(self) -> None:
        if self.start_date > self.end_date:
            raise ValueError("Period start must not be after its end")

    @classmethod
    def from_dates(cls, first_day: date, last_day: date) -> "Period":
        return cls(
            start_date=datetime.combine(first_day, time.min),
            end_date=datetime.combine(last_day, END_OF_DAY),
        )

    @property
    def first_day(self) -> date:
        return self.start_date.date()

    @property
    def last_day(self) -> date:
        return self.end_date.date()

    def days(self) -> list[date]:
        """Every calendar date in the period, ascending."""
        span = (self.last_day - self.first_day).days
        return [self.first_day + timedelta(days=offset) for offset in range(span + 1)]

    def as_dict(self) -> dict[str, str]:
        return {
            "startDate": self.first_day.isoformat(),
            "endDate": self.last_day.isoformat(),
        }


def _month_start(day: date, months_back: int = 0) -> date:
    index = day.year * 12 + (day.month - 1) - months_back
    return date(index // 12, index % 12 + 1, 1)


def _month_end(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def get_period_boundaries(period: str | None, today: date) -> tuple[date, date]:
    """Get the first and last calendar day for a period keyword.

    Args:
        period: One of the ``PeriodKeyword`` values. Anything else, including
            None, falls back to the last 30 days.
        today: The current calendar date.

    Returns:
        Tuple of (first_day, last_day), both inclusive.
    """
    if period == PeriodKeyword.LAST_7_DAYS:
        return today - timedelta(days=7), today
    elif period == PeriodKeyword.LAST_6_MONTHS:
        return _month_start(today, 5), _month_end(today)
    elif period == PeriodKeyword.LAST_12_MONTHS:
        return _month_start(today, 11), _month_end(today)
    elif period == PeriodKeyword.THIS_MONTH:
        return _month_start(today), _month_end(today)
    else:
        return today - timedelta(days=30), today


def resolve_period(
    period: str | None,
    custom_start: str | None = None,
    custom_end: str | None = None,
    *,
    now: datetime,
) -> Period:
    """Turn a period keyword or explicit custom bounds into a ``Period``.

    Custom bounds win when both parse as calendar dates. A malformed or
    missing bound is ignored and the keyword is used instead; callers can
    see which window was used from the period echoed in every response.

    Args:
        period: Period keyword (see ``PeriodKeyword``).
        custom_start: Optional ``YYYY-MM-DD`` start date.
        custom_end: Optional ``YYYY-MM-DD`` end date.
        now: Current time. Never read from the clock here.

    Returns:
        The resolved, day-aligned period.

    Raises:
        ValidationError: If both custom dates are valid but start is after end,
            or the range spans more than ``MAX_ANALYTICS_DAYS`` days.
    """
    first_day = parse_day(custom_start)
    last_day = parse_day(custom_end)

    if first_day is not None and last_day is not None:
        if first_day > last_day:
            raise ValidationError("startDate must not be after endDate", field="startDate")
        if (last_day - first_day).days + 1 > settings.MAX_ANALYTICS_DAYS:
            raise ValidationError(
                f"Custom period may span at most {settings.MAX_ANALYTICS_DAYS} days",
                field="startDate",
            )
        return Period.from_dates(first_day, last_day)

    if custom_start or custom_end:
        logger.info(
            "custom_period_ignored",
            custom_start=custom_start,
            custom_end=custom_end,
            fallback=period,
        )

    first_day, last_day = get_period_boundaries(period, to_naive_utc(now).date())
    return Period.from_dates(first_day, last_day)
