"""Analytics response schemas.

Field names are camelCase because these documents are consumed as-is by the
admin dashboard.
"""

from pydantic import BaseModel, Field


class PeriodEcho(BaseModel):
    """The period actually used, so callers can spot a custom-date fallback."""

    startDate: str = Field(description="First day of the period (YYYY-MM-DD)")
    endDate: str = Field(description="Last day of the period (YYYY-MM-DD)")


# ============ Summary ============


class ActivitySummary(BaseModel):
    """Population-wide activity for a period."""

    totalUsers: int = Field(description="Students plus teachers on the roster")
    activeTeachers: int = Field(description="Teachers on the roster")
    activeStudents: int = Field(description="Students on the roster")
    activeUsers: int = Field(description="Distinct users with at least one sign-in in the period")
    totalSignIns: int = Field(description="Raw sign-in events in the period")
    overallActivityRate: float = Field(description="activeUsers / totalUsers as a percentage")
    averageDailyAttendanceRate: float = Field(
        description="Mean of daily unique sign-in rates up to today"
    )


class AnalyticsSummaryResponse(ActivitySummary):
    period: PeriodEcho


# ============ Time series ============


class UserGrowthDataPoint(BaseModel):
    """New registrations on one day."""

    date: str = Field(description="Day (YYYY-MM-DD)")
    newStudents: int
    newTeachers: int
    totalNewUsers: int


class UserGrowthResponse(BaseModel):
    period: PeriodEcho
    granularity: str = Field(default="daily")
    userGrowth: list[UserGrowthDataPoint] = Field(description="One point per day of the period")


class DailySignInDataPoint(BaseModel):
    """Distinct users who signed in on one day."""

    date: str = Field(description="Day (YYYY-MM-DD)")
    signInCount: int


class DailySignInsResponse(BaseModel):
    period: PeriodEcho
    granularity: str = Field(default="daily")
    dailySignIns: list[DailySignInDataPoint] = Field(description="One point per day of the period")


# ============ Education levels ============


class EducationLevelBreakdown(BaseModel):
    """Activity and attendance for the students of one education level."""

    educationLevel: str
    totalStudents: int = Field(description="Students on the roster at this level")
    activeStudents: int = Field(description="Students at this level who signed in during the period")
    activityRate: float
    averageDailyAttendanceRate: float


class EducationLevelsResponse(BaseModel):
    period: PeriodEcho
    educationLevels: list[EducationLevelBreakdown]
