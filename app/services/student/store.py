import itertools
import logging
import threading
from dataclasses import replace
from typing import List, Optional

from app.core.exceptions import StudentNotFoundError
from app.models.student import Student

logger = logging.getLogger(__name__)


class StudentStore:
    """
    In-memory authority for student records and id assignment.

    Records are kept in insertion order. Ids start at 1, only ever grow and
    are never reused, even after a removal. A single lock guards both the
    collection and the id counter, so creations never share an id and
    readers never see a half-applied change.
    """

    def __init__(self):
        self._students: List[Student] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def list(self) -> List[Student]:
        """Snapshot of every student, in insertion order."""
        with self._lock:
            return list(self._students)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with self._lock:
            for student in self._students:
                if student.id == student_id:
                    return student
        return None

    def save(self, student: Student) -> Student:
        """
        Insert a new student (id == 0) or replace an existing one.

        New records get the next id and are appended. Updates keep the
        record's position; an update for an id that is not stored raises
        StudentNotFoundError and leaves the store untouched.
        """
        with self._lock:
            if student.is_new:
                saved = replace(student, id=next(self._ids))
                self._students.append(saved)
                logger.debug(f"Assigned id {saved.id} to new student")
                return saved

            for index, current in enumerate(self._students):
                if current.id == student.id:
                    self._students[index] = student
                    return student

        raise StudentNotFoundError(student.id)

    def remove(self, student_id: int) -> bool:
        with self._lock:
            for index, student in enumerate(self._students):
                if student.id == student_id:
                    del self._students[index]
                    logger.debug(f"Removed student {student_id}")
                    return True
        return False

    def clear(self) -> None:
        """Drop every record. The id counter is not reset."""
        with self._lock:
            self._students.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)
