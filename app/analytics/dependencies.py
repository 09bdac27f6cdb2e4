from datetime import datetime

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.analytics.services.analytics_service import AnalyticsService
from app.analytics.services.period import Period, resolve_period
from app.core.config import settings
from app.core.dependencies import get_now
from app.db.session import get_db


def get_period(
    period: str = Query(
        settings.DEFAULT_ANALYTICS_PERIOD,
        description="last7days, last30days, thisMonth, last6months or last12months",
    ),
    start_date: str | None = Query(
        None, alias="startDate", description="Custom start date (YYYY-MM-DD)"
    ),
    end_date: str | None = Query(None, alias="endDate", description="Custom end date (YYYY-MM-DD)"),
    now: datetime = Depends(get_now),
) -> Period:
    """Resolve the period query parameters shared by every analytics route."""
    return resolve_period(period, start_date, end_date, now=now)


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService.from_session(db)
