"""Dense day-by-day series from sparse grouped query results."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date

import structlog

from app.analytics.services.period import Period
from app.core.datetime_utils import day_key

logger = structlog.get_logger(__name__)

# (counter name, {day: value}) as produced by one grouped query
SparseSeries = tuple[str, Mapping[str | date, int]]


@dataclass
class DailyBucket:
    date: str
    counters: dict[str, int] = field(default_factory=dict)

    def __getitem__(self, name: str) -> int:
        return self.counters[name]

    def as_dict(self) -> dict[str, str | int]:
        return {"date": self.date, **self.counters}


def densify(
    period: Period,
    sparse_series: Iterable[SparseSeries],
    counter_names: Sequence[str],
    total_name: str | None = None,
) -> list[DailyBucket]:
    """Merge sparse per-day counts into one gap-free series spanning the period.

    Every calendar date of the period gets a bucket with all counters at 0
    before the sparse values are written in, so days without events are
    present with explicit zeros.

    Args:
        period: Window whose every calendar date must appear in the output.
        sparse_series: One ``(counter_name, {day: value})`` pair per query.
        counter_names: Counters each bucket carries.
        total_name: If set, each bucket also gets the sum of ``counter_names``
            under this name.

    Returns:
        Buckets ordered by ascending date.
    """
    buckets: dict[str, dict[str, int]] = {
        day.isoformat(): dict.fromkeys(counter_names, 0) for day in period.days()
    }

    for counter_name, values in sparse_series:
        if counter_name not in counter_names:
            raise ValueError(f"Unknown counter: {counter_name}")
        for raw_day, value in values.items():
            key = day_key(raw_day)
            if key not in buckets:
                logger.warning(
                    "densify_day_outside_period",
                    day=key,
                    counter=counter_name,
                    period=period.as_dict(),
                )
                buckets[key] = dict.fromkeys(counter_names, 0)
            buckets[key][counter_name] = value

    if total_name is not None:
        for counters in buckets.values():
            counters[total_name] = sum(counters[name] for name in counter_names)

    # zero-padded ISO dates sort chronologically
    return [DailyBucket(date=key, counters=buckets[key]) for key in sorted(buckets)]
