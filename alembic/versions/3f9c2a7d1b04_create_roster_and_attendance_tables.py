"""create_roster_and_attendance_tables

Revision ID: 3f9c2a7d1b04
Revises:
Create Date: 2025-04-20 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d1b04'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('students',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('student_number', sa.String(length=50), nullable=False),
    sa.Column('first_name', sa.String(length=100), nullable=False),
    sa.Column('middle_name', sa.String(length=100), nullable=True),
    sa.Column('last_name', sa.String(length=100), nullable=False),
    sa.Column('email', sa.String(length=255), nullable=False),
    sa.Column('code', sa.String(length=100), nullable=False),
    sa.Column('education_level', sa.String(length=50), nullable=False),
    sa.Column('grade_year_level', sa.String(length=50), nullable=False),
    sa.Column('section', sa.String(length=50), nullable=False),
    sa.Column('sign_in_time', sa.DateTime(), nullable=True),
    sa.Column('sign_out_time', sa.DateTime(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_students_id'), 'students', ['id'], unique=False)
    op.create_index(op.f('ix_students_student_number'), 'students', ['student_number'], unique=True)
    op.create_index(op.f('ix_students_email'), 'students', ['email'], unique=True)
    op.create_index(op.f('ix_students_code'), 'students', ['code'], unique=True)
    op.create_index(op.f('ix_students_education_level'), 'students', ['education_level'], unique=False)
    op.create_index(op.f('ix_students_created_at'), 'students', ['created_at'], unique=False)

    op.create_table('teachers',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('first_name', sa.String(length=100), nullable=False),
    sa.Column('middle_name', sa.String(length=100), nullable=True),
    sa.Column('last_name', sa.String(length=100), nullable=False),
    sa.Column('email', sa.String(length=255), nullable=False),
    sa.Column('code', sa.String(length=100), nullable=False),
    sa.Column('status', sa.String(length=20), nullable=False),
    sa.Column('sign_in_time', sa.DateTime(), nullable=True),
    sa.Column('sign_out_time', sa.DateTime(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_teachers_id'), 'teachers', ['id'], unique=False)
    op.create_index(op.f('ix_teachers_email'), 'teachers', ['email'], unique=True)
    op.create_index(op.f('ix_teachers_code'), 'teachers', ['code'], unique=True)
    op.create_index(op.f('ix_teachers_created_at'), 'teachers', ['created_at'], unique=False)

    op.create_table('attendance_events',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('user_id', sa.Uuid(), nullable=False),
    sa.Column('user_type', sa.Enum('Student', 'Teacher', name='usertype'), nullable=False),
    sa.Column('event_type', sa.Enum('sign-in', 'sign-out', name='eventtype'), nullable=False),
    sa.Column('timestamp', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_attendance_events_id'), 'attendance_events', ['id'], unique=False)
    op.create_index(op.f('ix_attendance_events_user_id'), 'attendance_events', ['user_id'], unique=False)
    op.create_index(op.f('ix_attendance_events_user_type'), 'attendance_events', ['user_type'], unique=False)
    op.create_index(op.f('ix_attendance_events_event_type'), 'attendance_events', ['event_type'], unique=False)
    op.create_index(op.f('ix_attendance_events_timestamp'), 'attendance_events', ['timestamp'], unique=False)
    op.create_index('ix_attendance_events_type_timestamp', 'attendance_events', ['event_type', 'timestamp'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_attendance_events_type_timestamp', table_name='attendance_events')
    op.drop_index(op.f('ix_attendance_events_timestamp'), table_name='attendance_events')
    op.drop_index(op.f('ix_attendance_events_event_type'), table_name='attendance_events')
    op.drop_index(op.f('ix_attendance_events_user_type'), table_name='attendance_events')
    op.drop_index(op.f('ix_attendance_events_user_id'), table_name='attendance_events')
    op.drop_index(op.f('ix_attendance_events_id'), table_name='attendance_events')
    op.drop_table('attendance_events')
    sa.Enum(name='eventtype').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='usertype').drop(op.get_bind(), checkfirst=True)

    op.drop_index(op.f('ix_teachers_created_at'), table_name='teachers')
    op.drop_index(op.f('ix_teachers_code'), table_name='teachers')
    op.drop_index(op.f('ix_teachers_email'), table_name='teachers')
    op.drop_index(op.f('ix_teachers_id'), table_name='teachers')
    op.drop_table('teachers')

    op.drop_index(op.f('ix_students_created_at'), table_name='students')
    op.drop_index(op.f('ix_students_education_level'), table_name='students')
    op.drop_index(op.f('ix_students_code'), table_name='students')
    op.drop_index(op.f('ix_students_email'), table_name='students')
    op.drop_index(op.f('ix_students_student_number'), table_name='students')
    op.drop_index(op.f('ix_students_id'), table_name='students')
    op.drop_table('students')
