from fastapi import Path, Request
from app.services.student.student import StudentService


def get_student_service(request: Request) -> StudentService:
    """
    Dependency that hands the endpoints the service built in create_app.
    Every request of one app shares the same service, and so the same store.
    """
    return request.app.state.student_service


def get_student_id(student_id: str = Path(pattern=r"^\d+$")) -> int:
    """Path id made of digits only; "1.0", "-1" or "abc" fail validation."""
    return int(student_id)
