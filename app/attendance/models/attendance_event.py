import enum
import uuid
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import Enum, Index
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class UserType(str, enum.Enum):
    STUDENT = "Student"
    TEACHER = "Teacher"


class EventType(str, enum.Enum):
    SIGN_IN = "sign-in"
    SIGN_OUT = "sign-out"


@dataclass(frozen=True)
class StudentRef:
    id: uuid.UUID
    user_type = UserType.STUDENT


@dataclass(frozen=True)
class TeacherRef:
    id: uuid.UUID
    user_type = UserType.TEACHER


# Owner of an attendance event. The referenced collection is carried by the
# variant itself and only becomes a (user_type, user_id) pair in the table.
UserRef = StudentRef | TeacherRef


def user_ref_from_storage(user_type: UserType | str, user_id: uuid.UUID) -> UserRef:
    if UserType(user_type) == UserType.STUDENT:
        return StudentRef(user_id)
    return TeacherRef(user_id)


class AttendanceEvent(Base):
    """One sign-in or sign-out action. Rows are written once and never updated."""

    __tablename__ = "attendance_events"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(index=True)
    user_type: Mapped[UserType] = mapped_column(
        Enum(UserType, values_callable=lambda obj: [e.value for e in obj]),
        index=True,
    )
    event_type: Mapped[EventType] = mapped_column(
        Enum(EventType, values_callable=lambda obj: [e.value for e in obj]),
        index=True,
    )
    timestamp: Mapped[datetime] = mapped_column(default=datetime.utcnow, index=True)

    __table_args__ = (
        Index("ix_attendance_events_type_timestamp", "event_type", "timestamp"),
    )

    @classmethod
    def record(
        cls, owner: UserRef, event_type: EventType, timestamp: datetime | None = None
    ) -> "AttendanceEvent":
        event = cls(user_id=owner.id, user_type=owner.user_type, event_type=event_type)
        if timestamp is not None:
            event.timestamp = timestamp
        return event

    @property
    def owner(self) -> UserRef:
        return user_ref_from_storage(self.user_type, self.user_id)

    def __repr__(self) -> str:
        return (
            f"<AttendanceEvent({self.event_type.value} by {self.user_type.value} "
            f"{self.user_id} at {self.timestamp})>"
        )
