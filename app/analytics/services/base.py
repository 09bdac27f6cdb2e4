"""Rate helpers shared by the analytics services."""

from datetime import date

from app.analytics.services.densifier import DailyBucket

RATE_DECIMAL_PLACES = 2


def calculate_rate(part: int, whole: int) -> float:
    """Percentage of ``part`` in ``whole``.

    Args:
        part: Number of participants.
        whole: Population size.

    Returns:
        Percentage rounded to 2 decimal places and capped at 100.
        Returns 0.0 when the population is empty.
    """
    if whole <= 0:
        return 0.0
    return round(min(part / whole * 100, 100.0), RATE_DECIMAL_PLACES)


def average_daily_rate(
    buckets: list[DailyBucket], counter: str, population: int, today: date
) -> float:
    """Mean of the per-day participation rates up to and including ``today``.

    Days with no participants count as 0% and still count towards the number
    of days averaged. Days after ``today`` are left out, so a period that ends
    in the future is averaged over fewer days than it spans.

    Args:
        buckets: Dense series, one bucket per day of the period.
        counter: Bucket counter holding the daily participant count.
        population: Population size the daily counts are measured against.
        today: Current calendar date.

    Returns:
        Average rate rounded to 2 decimal places, 0.0 for an empty population
        or when no day of the period has started yet.
    """
    if population <= 0:
        return 0.0

    daily_rates = [
        min(bucket[counter] / population * 100, 100.0)
        for bucket in buckets
        if date.fromisoformat(bucket.date) <= today
    ]
    if not daily_rates:
        return 0.0
    return round(sum(daily_rates) / len(daily_rates), RATE_DECIMAL_PLACES)
