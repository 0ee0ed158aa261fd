"""API Exception Handlers - translate domain errors into HTTP responses"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions import (
    AuthRequired, BookingAppError, InvalidCriteria, InvalidRange, NotFound, PersistenceError
)

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    InvalidCriteria: 400,
    InvalidRange: 400,
    NotFound: 404,
    AuthRequired: 401,
    PersistenceError: 503,
}


def _error_response(status_code: int, exc: BookingAppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": type(exc).__name__, "detail": exc.message},
        headers=headers,
    )


async def booking_app_error_handler(request: Request, exc: BookingAppError) -> JSONResponse:
    status_code = next(
        (code for error_type, code in _STATUS_CODES.items() if isinstance(exc, error_type)),
        400,
    )
    if isinstance(exc, PersistenceError):
        logger.error("Persistence error on %s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return _error_response(status_code, exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingAppError, booking_app_error_handler)
