"""Attendance analytics routes for the admin dashboard."""

from datetime import datetime

from fastapi import APIRouter, Depends

from app.analytics.dependencies import get_analytics_service, get_period
from app.analytics.schemas.analytics import (
    AnalyticsSummaryResponse,
    DailySignInsResponse,
    EducationLevelsResponse,
    UserGrowthResponse,
)
from app.analytics.services.analytics_service import AnalyticsService
from app.analytics.services.period import Period
from app.core.dependencies import get_now

router = APIRouter(prefix="/analytics", tags=["admin-analytics"])


@router.get("/summary", response_model=AnalyticsSummaryResponse)
async def get_analytics_summary(
    period: Period = Depends(get_period),
    now: datetime = Depends(get_now),
    service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsSummaryResponse:
    """
    Get attendance summary for a period.

    Returns:
    - Roster totals (students, teachers, all users)
    - Overall activity rate (share of users who signed in at least once)
    - Average daily attendance rate (days up to today)
    - The resolved period
    """
    return service.get_summary(period, now)


@router.get("/user-growth", response_model=UserGrowthResponse)
async def get_user_growth(
    period: Period = Depends(get_period),
    service: AnalyticsService = Depends(get_analytics_service),
) -> UserGrowthResponse:
    """
    Get new students and teachers per day.

    Returns one data point for every day of the period, zero-filled.
    """
    return service.get_user_growth(period)


@router.get("/daily-sign-ins", response_model=DailySignInsResponse)
async def get_daily_sign_ins(
    period: Period = Depends(get_period),
    service: AnalyticsService = Depends(get_analytics_service),
) -> DailySignInsResponse:
    """
    Get the number of distinct users who signed in on each day.

    Returns one data point for every day of the period, zero-filled.
    """
    return service.get_daily_sign_ins(period)


@router.get("/education-levels", response_model=EducationLevelsResponse)
async def get_education_level_breakdown(
    period: Period = Depends(get_period),
    now: datetime = Depends(get_now),
    service: AnalyticsService = Depends(get_analytics_service),
) -> EducationLevelsResponse:
    """
    Get student activity and attendance per education level.

    Returns:
    - One entry per education level on the roster
    - Student count, active students, activity rate, average daily attendance rate
    """
    return service.get_education_levels(period, now)
