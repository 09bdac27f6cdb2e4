"""Attendance analytics engine.

This package is split into small single-purpose services:
- period: Period keywords and resolution into inclusive day ranges
- densifier: Gap-free daily series from sparse grouped counts
- base: Rate and daily-average helpers
- activity_service: Whole-roster activity and attendance rates
- growth_service: New students/teachers per day
- sign_in_service: Distinct sign-ins per day
- education_level_service: Per-education-level breakdown
- analytics_service: Facade used by the routes
"""

from app.analytics.services.activity_service import ActivitySummarizer
from app.analytics.services.analytics_service import AnalyticsService
from app.analytics.services.base import average_daily_rate, calculate_rate
from app.analytics.services.densifier import DailyBucket, densify
from app.analytics.services.education_level_service import EducationLevelService
from app.analytics.services.growth_service import GrowthStatsService
from app.analytics.services.period import (
    Period,
    PeriodKeyword,
    get_period_boundaries,
    resolve_period,
)
from app.analytics.services.sign_in_service import SignInSeriesService

__all__ = [
    # Period and series helpers
    "Period",
    "PeriodKeyword",
    "get_period_boundaries",
    "resolve_period",
    "DailyBucket",
    "densify",
    "calculate_rate",
    "average_daily_rate",
    # Services
    "ActivitySummarizer",
    "GrowthStatsService",
    "SignInSeriesService",
    "EducationLevelService",
    "AnalyticsService",
]
