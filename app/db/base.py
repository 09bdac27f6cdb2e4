"""
Database base module - imports all models for Alembic migration detection.

This module imports all SQLAlchemy models to ensure they are registered
with Alembic for automatic migration generation. While the imports appear
unused, they are essential for the migration system to work properly.
"""

from app.attendance.models.attendance_event import AttendanceEvent
from app.db.session import Base
from app.roster.models.student import Student
from app.roster.models.teacher import Teacher

# Export all models for Alembic
__all__ = [
    "Base",
    "AttendanceEvent",
    "Student",
    "Teacher",
]
