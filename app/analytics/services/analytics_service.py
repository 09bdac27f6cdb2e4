"""Analytics service used by the admin routes."""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.analytics.schemas.analytics import (
    AnalyticsSummaryResponse,
    DailySignInsResponse,
    EducationLevelsResponse,
    PeriodEcho,
    UserGrowthResponse,
)
from app.analytics.services.activity_service import ActivitySummarizer
from app.analytics.services.education_level_service import EducationLevelService
from app.analytics.services.growth_service import GrowthStatsService
from app.analytics.services.period import Period
from app.analytics.services.sign_in_service import SignInSeriesService
from app.analytics.stores import (
    AttendanceEventStore,
    RosterStore,
    SqlAttendanceEventStore,
    SqlRosterStore,
)
from app.core.exceptions import DataRetrievalError

logger = structlog.get_logger(__name__)


class AnalyticsService:
    """Builds every analytics response from one pair of stores.

    Each public method echoes the resolved period and either returns a
    complete result or raises ``DataRetrievalError``; nothing partial is
    ever returned.
    """

    def __init__(self, events: AttendanceEventStore, roster: RosterStore) -> None:
        self.activity = ActivitySummarizer(events, roster)
        self.growth = GrowthStatsService(roster)
        self.sign_ins = SignInSeriesService(events)
        self.education_levels = EducationLevelService(events, roster)

    @classmethod
    def from_session(cls, db: Session) -> "AnalyticsService":
        return cls(SqlAttendanceEventStore(db), SqlRosterStore(db))

    @contextmanager
    def _computing(self, report: str, period: Period) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        except SQLAlchemyError as e:
            logger.exception("analytics_query_failed", report=report, period=period.as_dict())
            raise DataRetrievalError(
                f"Failed to retrieve data for the {report} report", source=report
            ) from e
        logger.info(
            "analytics_computed",
            report=report,
            period=period.as_dict(),
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )

    def get_summary(self, period: Period, now: datetime) -> AnalyticsSummaryResponse:
        with self._computing("summary", period):
            summary = self.activity.summarize(period, now)
        return AnalyticsSummaryResponse(
            period=PeriodEcho(**period.as_dict()),
            **summary.model_dump(),
        )

    def get_user_growth(self, period: Period) -> UserGrowthResponse:
        with self._computing("user_growth", period):
            points = self.growth.growth(period)
        return UserGrowthResponse(period=PeriodEcho(**period.as_dict()), userGrowth=points)

    def get_daily_sign_ins(self, period: Period) -> DailySignInsResponse:
        with self._computing("daily_sign_ins", period):
            points = self.sign_ins.daily_sign_ins(period)
        return DailySignInsResponse(period=PeriodEcho(**period.as_dict()), dailySignIns=points)

    def get_education_levels(self, period: Period, now: datetime) -> EducationLevelsResponse:
        with self._computing("education_levels", period):
            levels = self.education_levels.breakdown(period, now)
        return EducationLevelsResponse(
            period=PeriodEcho(**period.as_dict()),
            educationLevels=levels,
        )
