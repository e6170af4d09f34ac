from fastapi import APIRouter, Depends, status
from typing import List
from app.api.deps import get_student_id, get_student_service
from app.core.exceptions import StudentNotFoundError
from app.models.student import Student as StudentRecord
from app.services.student.student import StudentService
from app.schemas.student import Student, StudentCreate, MessageResponse, ErrorResponse

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=List[Student])
def get_students(service: StudentService = Depends(get_student_service)):
    """
    Lista todos os alunos, na ordem de cadastro
    """
    return service.list_students()


@router.get("/{student_id}", response_model=Student, responses=NOT_FOUND)
def get_student(
    student_id: int = Depends(get_student_id),
    service: StudentService = Depends(get_student_service)
):
    """
    Busca um aluno pelo ID
    """
    student = service.get_student(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)
    return student


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    service: StudentService = Depends(get_student_service)
):
    """
    Cadastra um novo aluno

    Campos obrigatórios:
    - **name**: Nome do aluno
    - **age**: Idade (aceita número ou texto numérico, ex. "20")
    - **email**: Email
    - **course**: Curso
    """
    record = StudentRecord(
        name=student.name,
        age=student.age,
        email=student.email,
        course=student.course
    )
    return service.save_student(record)


@router.delete("/{student_id}", response_model=MessageResponse, responses=NOT_FOUND)
def delete_student(
    student_id: int = Depends(get_student_id),
    service: StudentService = Depends(get_student_service)
):
    """
    Remove um aluno
    """
    if not service.remove_student(student_id):
        raise StudentNotFoundError(student_id)
    return {"message": "Aluno removido com sucesso"}
