# app/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import BaseAPIException, BadRequestException, MethodNotAllowedException
from app.core.logging import logger


class UTF8JSONResponse(JSONResponse):
    """JSON response that always advertises its charset."""
    media_type = "application/json; charset=UTF-8"


def error_response(status_code: int, message: str, details=None, headers=None) -> UTF8JSONResponse:
    content = {"error": message}
    if details:
        content["details"] = details
    return UTF8JSONResponse(status_code=status_code, content=content, headers=headers)


def api_error_response(request: Request, exc: BaseAPIException, headers=None) -> UTF8JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"[{exc.code}] {request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"[{exc.code}] {request.method} {request.url.path}: {exc.message}")
    return error_response(exc.status_code, exc.message, exc.details, headers=headers)


def field_name(loc) -> str:
    # ("body", "age") -> "age"; ("body", 0) from a JSON decode error -> "body"
    parts = [str(x) for x in loc if x not in ("body", "path") and not isinstance(x, int)]
    return ".".join(parts) or "body"


# 1. Handle custom logic errors (raised by our own code)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return api_error_response(request, exc)


# 2. Handle validation errors (bad path id, malformed JSON, missing/wrong fields)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    in_path = False
    for error in exc.errors():
        loc = error.get("loc", ())
        if loc and loc[0] == "path":
            in_path = True
        details[field_name(loc)] = error["msg"]

    message = "ID inválido" if in_path else "Dados de entrada inválidos"
    return api_error_response(request, BadRequestException(message, details))


# 3. Handle standard HTTP errors raised by the router (405, 404 ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    headers = getattr(exc, "headers", None)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return api_error_response(request, MethodNotAllowedException(), headers=headers)
    return error_response(exc.status_code, str(exc.detail), headers=headers)


# 4. Handle general system errors (bugs, library failures)
async def general_exception_handler(request: Request, exc: Exception):
    # Full traceback goes to the log, the message goes to the client
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or exc.__class__.__name__)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
