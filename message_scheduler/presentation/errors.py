"""Map domain errors onto HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..domain.errors import (
    MessageNotEditableError,
    MessageNotFoundError,
    MessageValidationError,
    SchedulerError,
)

_STATUS_CODES: dict[type[SchedulerError], int] = {
    MessageValidationError: 422,
    MessageNotFoundError: 404,
    MessageNotEditableError: 409,
}


def status_code_for(error: SchedulerError) -> int:
    for error_type, code in _STATUS_CODES.items():
        if isinstance(error, error_type):
            return code
    return 400


async def scheduler_error_handler(request: Request, exc: SchedulerError) -> JSONResponse:
    body: dict[str, str | None] = {"error": exc.kind, "detail": str(exc)}
    if isinstance(exc, MessageValidationError):
        body["field"] = exc.field
    return JSONResponse(status_code=status_code_for(exc), content=body)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SchedulerError, scheduler_error_handler)
