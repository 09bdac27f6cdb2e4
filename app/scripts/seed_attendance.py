"""
Attendance Seeder

Generates sign-in/sign-out pairs for every student on the roster:
Mondays 07:00-12:00, Wednesdays and Fridays 07:00-11:00, each time shifted
by up to 25 minutes either way.

Usage:
    python app/scripts/seed_attendance.py 2025-04-21 2025-04-30 [--seed 42]
"""

import argparse
import random
import sys
from datetime import date, datetime, time, timedelta
from pathlib import Path

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.attendance.models.attendance_event import (  # noqa: E402
    AttendanceEvent,
    EventType,
    StudentRef,
    UserRef,
)
from app.db.session import SessionLocal  # noqa: E402
from app.roster.models.student import Student  # noqa: E402

# weekday -> ((sign-in hour, minute), (sign-out hour, minute))
CLASS_SCHEDULE: dict[int, tuple[tuple[int, int], tuple[int, int]]] = {
    0: ((7, 0), (12, 0)),
    2: ((7, 0), (11, 0)),
    4: ((7, 0), (11, 0)),
}

VARIATION_MINUTES = 25


def _varied_time(day: date, hour: int, minute: int, rng: random.Random) -> datetime:
    offset = rng.randint(-VARIATION_MINUTES, VARIATION_MINUTES)
    return datetime.combine(day, time(hour, minute)) + timedelta(minutes=offset)


def generate_attendance_events(
    owners: list[UserRef], start: date, end: date, rng: random.Random
) -> list[AttendanceEvent]:
    """Build (unsaved) sign-in and sign-out events for each scheduled day.

    Args:
        owners: People to generate attendance for.
        start: First day, inclusive.
        end: Last day, inclusive.
        rng: Random source, seeded for reproducible output.

    Returns:
        Events in day order, a sign-in followed by its sign-out per owner.
    """
    events: list[AttendanceEvent] = []
    day = start
    while day <= end:
        slot = CLASS_SCHEDULE.get(day.weekday())
        if slot is not None:
            (in_hour, in_minute), (out_hour, out_minute) = slot
            for owner in owners:
                signed_in = _varied_time(day, in_hour, in_minute, rng)
                signed_out = _varied_time(day, out_hour, out_minute, rng)
                if signed_out <= signed_in:
                    signed_out = signed_in + timedelta(hours=1)
                events.append(AttendanceEvent.record(owner, EventType.SIGN_IN, signed_in))
                events.append(AttendanceEvent.record(owner, EventType.SIGN_OUT, signed_out))
        day += timedelta(days=1)
    return events


def seed_attendance(start: date, end: date, seed: int | None = None) -> None:
    db = SessionLocal()
    try:
        owners: list[UserRef] = [StudentRef(row[0]) for row in db.query(Student.id).all()]
        if not owners:
            print("✗ No students found, nothing to seed")
            return

        events = generate_attendance_events(owners, start, end, random.Random(seed))
        db.add_all(events)
        db.commit()

        print(f"✓ Created {len(events)} attendance events for {len(owners)} students")
        print(f"  Period: {start.isoformat()} to {end.isoformat()}")
    except Exception as e:
        print(f"✗ Error seeding attendance: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed synthetic attendance events")
    parser.add_argument("start", type=date.fromisoformat, help="First day (YYYY-MM-DD)")
    parser.add_argument("end", type=date.fromisoformat, help="Last day (YYYY-MM-DD)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    if args.start > args.end:
        parser.error("start must not be after end")

    seed_attendance(args.start, args.end, args.seed)


if __name__ == "__main__":
    main()
