"""
Teacher lookup service.
"""

from typing import List, Union

from ..database import Teacher, TeacherRepository
from ..exceptions import TeacherNotFoundError
from ..utils.validation import parse_identifier


class TeacherService:
    """Read-only access to teachers."""

    def __init__(self, teachers: TeacherRepository):
        self.teachers = teachers

    def find_all(self) -> List[Teacher]:
        return self.teachers.find_all()

    def get_by_id(self, teacher_id: Union[str, int]) -> Teacher:
        tid = parse_identifier(teacher_id, "teacher")
        teacher = self.teachers.find_by_id(tid)
        if teacher is None:
            raise TeacherNotFoundError("Teacher not found", {"teacher_id": tid})
        return teacher
