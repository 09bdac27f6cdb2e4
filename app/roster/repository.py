from sqlalchemy.orm import Session

from app.core.repository import BaseRepository
from app.roster.models.student import Student
from app.roster.models.teacher import Teacher


class StudentRepository(BaseRepository[Student]):
    def __init__(self, db: Session):
        super().__init__(db, Student)

    def find_by_code(self, code: str) -> Student | None:
        return self.find_one_by(code=code)


class TeacherRepository(BaseRepository[Teacher]):
    def __init__(self, db: Session):
        super().__init__(db, Teacher)

    def find_by_code(self, code: str) -> Teacher | None:
        return self.find_one_by(code=code)
