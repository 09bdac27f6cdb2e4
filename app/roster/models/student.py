import uuid
from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class Student(Base):
    """
    Student roster entry.

    Attributes:
        student_number: Institutional student number (unique)
        code: Scan code used at the kiosk to sign in/out (unique)
        education_level: Category used by the education level breakdown
            ("Primary" or "Secondary" in practice)
        sign_in_time / sign_out_time: Last sign action, mirrored from the event log
        created_at: Registration timestamp, drives the growth statistics
    """

    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    student_number: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100))
    middle_name: Mapped[str | None] = mapped_column(String(100), default=None)
    last_name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    code: Mapped[str] = mapped_column(String(100), unique=True, index=True)

    education_level: Mapped[str] = mapped_column(String(50), index=True)
    grade_year_level: Mapped[str] = mapped_column(String(50))
    section: Mapped[str] = mapped_column(String(50))

    sign_in_time: Mapped[datetime | None] = mapped_column(default=None)
    sign_out_time: Mapped[datetime | None] = mapped_column(default=None)

    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        default=datetime.utcnow, onupdate=datetime.utcnow
    )

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, number={self.student_number}, level={self.education_level})>"
