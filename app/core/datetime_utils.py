from datetime import UTC, date, datetime, time
from typing import Annotated

from pydantic.functional_serializers import PlainSerializer

# Last instant of a calendar day at millisecond precision
END_OF_DAY = time(23, 59, 59, 999000)


def _serialize_utc_datetime(v: datetime | None) -> str | None:
    if v is None:
        return None
    if v.tzinfo is None:
        v = v.replace(tzinfo=UTC)
    return v.isoformat()


UTCDatetime = Annotated[datetime, PlainSerializer(_serialize_utc_datetime)]


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the way timestamps are stored."""
    return to_naive_utc(datetime.now(UTC))


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def day_key(value: date | datetime | str) -> str:
    """Normalize a grouped-by-day value to a ``YYYY-MM-DD`` key.

    PostgreSQL returns ``date`` objects for ``date(...)`` while SQLite returns
    strings, so grouped query results pass through here before merging.
    """
    if isinstance(value, str):
        return value[:10]
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def parse_day(value: str | None) -> date | None:
    """Parse a calendar date, returning None for missing or malformed input.

    Accepts ``YYYY-MM-DD`` or a full ISO-8601 datetime, in which case only the
    date part is kept.
    """
    if not value:
        return None
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None
