"""Roster models."""

from app.roster.models.student import Student
from app.roster.models.teacher import Teacher

__all__ = [
    "Student",
    "Teacher",
]
