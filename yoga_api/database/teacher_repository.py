"""
Teacher repository.
"""

from typing import List, Optional

from sqlmodel import Session, select

from .models import Teacher


class TeacherRepository:
    """Repository for teacher database operations."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self.db.get(Teacher, teacher_id)

    def find_all(self) -> List[Teacher]:
        return list(self.db.exec(select(Teacher).order_by(Teacher.id)).all())

    def save(self, teacher: Teacher) -> Teacher:
        try:
            self.db.add(teacher)
            self.db.commit()
            self.db.refresh(teacher)
        except Exception:
            self.db.rollback()
            raise
        return teacher
