"""
Traduzione eccezioni → risposte HTTP.

Ogni risposta di errore ha lo stesso corpo ErrorOut {message, status}.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flightbooking.core.exceptions import AverageFlightsException, FlightBookingError
from flightbooking.models.schemas import ErrorOut

logger = logging.getLogger(__name__)


def build_error(message: str, status_code: int) -> JSONResponse:
    body = ErrorOut(message=message, status=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def flight_booking_error_handler(request: Request, exc: FlightBookingError) -> JSONResponse:
    if isinstance(exc, AverageFlightsException):
        # la causa resta nei log, al client solo il messaggio generico
        logger.error(
            "%s %s failed: %s",
            request.method, request.url.path, type(exc.cause).__name__ if exc.cause else "unknown",
            exc_info=exc,
        )
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return build_error(exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """First validation message only, always 400."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    if errors and errors[0].get("loc"):
        field = errors[0]["loc"][-1]
        message = f"{field}: {message}"
    return build_error(message, 400)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return build_error(str(exc.detail), exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FlightBookingError, flight_booking_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
