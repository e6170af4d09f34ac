from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the application.
    Each subclass carries the HTTP status it maps to, so the handlers in
    app/core/handlers.py can turn it into a JSON error body.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """400: malformed id, body or field value"""
    def __init__(self, message: str = "Requisição inválida", details: dict = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class PermissionDeniedException(BaseAPIException):
    """403: access outside the allowed area (e.g. static root)"""
    def __init__(self, message: str = "Acesso negado"):
        super().__init__(
            message=message,
            code="PERMISSION_DENIED",
            status_code=status.HTTP_403_FORBIDDEN
        )

class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Recurso não encontrado"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

class MethodNotAllowedException(BaseAPIException):
    """405: method/path combination not supported"""
    def __init__(self, message: str = "Método não suportado"):
        super().__init__(
            message=message,
            code="METHOD_NOT_ALLOWED",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED
        )

# =========================================================
# 2. STUDENT DOMAIN ERRORS
# =========================================================

class StudentNotFoundError(NotFoundException):
    """
    404: no stored student has the requested id.
    The message stays the same for get, delete and update so clients can
    rely on a single not-found contract.
    """
    def __init__(self, student_id: Optional[int] = None):
        super().__init__(message="Aluno não encontrado")
        self.student_id = student_id
