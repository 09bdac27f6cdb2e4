"""Registration growth statistics."""

from app.analytics.schemas.analytics import UserGrowthDataPoint
from app.analytics.services.densifier import densify
from app.analytics.services.period import Period
from app.analytics.stores import RosterStore
from app.attendance.models.attendance_event import UserType

NEW_STUDENTS = "newStudents"
NEW_TEACHERS = "newTeachers"
TOTAL_NEW_USERS = "totalNewUsers"


class GrowthStatsService:
    """Service for new students and teachers per day."""

    def __init__(self, roster: RosterStore) -> None:
        self.roster = roster

    def growth(self, period: Period) -> list[UserGrowthDataPoint]:
        """Get daily registrations for both populations merged into one series.

        Args:
            period: Resolved analysis window.

        Returns:
            One data point per day of the period, ascending, with
            ``totalNewUsers = newStudents + newTeachers``.
        """
        new_students = self.roster.roster_created_by_day_grouped(
            UserType.STUDENT, period.start_date, period.end_date
        )
        new_teachers = self.roster.roster_created_by_day_grouped(
            UserType.TEACHER, period.start_date, period.end_date
        )

        buckets = densify(
            period,
            [(NEW_STUDENTS, new_students), (NEW_TEACHERS, new_teachers)],
            [NEW_STUDENTS, NEW_TEACHERS],
            total_name=TOTAL_NEW_USERS,
        )

        return [
            UserGrowthDataPoint(
                date=bucket.date,
                newStudents=bucket[NEW_STUDENTS],
                newTeachers=bucket[NEW_TEACHERS],
                totalNewUsers=bucket[TOTAL_NEW_USERS],
            )
            for bucket in buckets
        ]
