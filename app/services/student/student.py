from typing import List, Optional

from app.models.student import Student
from app.services.student.store import StudentStore


class StudentService:
    """Delegates to the store; business rules for students belong here."""

    def __init__(self, store: Optional[StudentStore] = None):
        self.store = store if store is not None else StudentStore()

    def list_students(self) -> List[Student]:
        """Snapshot of all students"""
        return self.store.list()

    def get_student(self, student_id: int) -> Optional[Student]:
        """Get one student by id, None when absent"""
        return self.store.get_by_id(student_id)

    def save_student(self, student: Student) -> Student:
        """Create (id == 0) or replace a student"""
        return self.store.save(student)

    def remove_student(self, student_id: int) -> bool:
        """Delete a student, True if something was removed"""
        return self.store.remove(student_id)
