"""Daily sign-in series."""

from app.analytics.schemas.analytics import DailySignInDataPoint
from app.analytics.services.densifier import DailyBucket, densify
from app.analytics.services.period import Period
from app.analytics.stores import AttendanceEventStore
from app.attendance.models.attendance_event import EventType

SIGN_IN_COUNT = "signInCount"


class SignInSeriesService:
    """Distinct sign-ins per day, zero-filled across the whole period."""

    def __init__(self, events: AttendanceEventStore) -> None:
        self.events = events

    def daily_counts(
        self, period: Period, education_level: str | None = None
    ) -> list[DailyBucket]:
        """Dense ``signInCount`` buckets, optionally restricted to one education level."""
        counts = self.events.count_by_day_grouped(
            EventType.SIGN_IN,
            period.start_date,
            period.end_date,
            education_level=education_level,
        )
        return densify(period, [(SIGN_IN_COUNT, counts)], [SIGN_IN_COUNT])

    def daily_sign_ins(self, period: Period) -> list[DailySignInDataPoint]:
        return [
            DailySignInDataPoint(date=bucket.date, signInCount=bucket[SIGN_IN_COUNT])
            for bucket in self.daily_counts(period)
        ]
