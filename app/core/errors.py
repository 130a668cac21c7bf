"""Domain errors and their HTTP translation."""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class UnauthenticatedError(Exception):
    """Caller could not be authenticated. The HTTP body only ever says why in two words."""

    public_message = "Invalid token"


class MissingTokenError(UnauthenticatedError):
    public_message = "No token provided"

    def __init__(self):
        super().__init__("No Authorization header on request")


class TokenRejectedError(UnauthenticatedError):
    """The auth service answered but said the token is not valid."""


class AuthServiceUnavailableError(UnauthenticatedError):
    """The auth service could not be reached or gave an unusable answer."""


class TaskNotFoundError(Exception):
    message = "Task Not Found"

    def __init__(self, task_id: str):
        super().__init__(f"Task with id '{task_id}' was not found.")
        self.task_id = task_id


class TaskOperationError(Exception):
    """Any store failure, tagged with the operation that failed."""

    def __init__(self, operation: str, detail: str = ""):
        message = f"{operation}: {detail}" if detail else operation
        super().__init__(message)
        self.operation = operation
        self.detail = detail
        self.message = message


def error_response(exc: Exception) -> JSONResponse:
    if isinstance(exc, UnauthenticatedError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"msg": exc.public_message},
        )
    if isinstance(exc, TaskNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": exc.message},
        )
    if isinstance(exc, TaskOperationError):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": exc.message},
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc)},
    )


async def _handle_unauthenticated(request: Request, exc: UnauthenticatedError):
    logger.warning(
        "Rejected %s %s (%s): %s", request.method, request.url.path, type(exc).__name__, exc
    )
    return error_response(exc)


async def _handle_not_found(request: Request, exc: TaskNotFoundError):
    return error_response(exc)


async def _handle_operation_error(request: Request, exc: TaskOperationError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(exc)


# Un body invalide est traité comme un échec de l'opération (500), pas comme un 422
VALIDATION_OPERATIONS = {
    "POST": "Error creating task",
    "PUT": "Error updating task",
}


def _validation_text(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = [str(item) for item in error.get("loc", ()) if item != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(parts)


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    operation = VALIDATION_OPERATIONS.get(request.method, "Error processing request")
    return await _handle_operation_error(request, TaskOperationError(operation, _validation_text(exc)))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(exc)


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(UnauthenticatedError, _handle_unauthenticated)
    app.add_exception_handler(TaskNotFoundError, _handle_not_found)
    app.add_exception_handler(TaskOperationError, _handle_operation_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
