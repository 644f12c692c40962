"""
Exception handlers turning errors into the API's JSON error body:
``{"error": <name>, "message": ..., "details": {...}}``.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from staff_api.exceptions import AppError

logger = logging.getLogger(__name__)


def _error_body(error: str, message, details=None) -> dict:
    body = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    return jsonable_encoder(body)


def _request_context(request: Request) -> dict:
    return {"path": request.url.path, "method": request.method}


def add_exception_handlers(app: FastAPI) -> None:
    """
    Register the error handlers on the application.

    Service errors keep their own status (400 unknown reference, 404 missing
    record, 409 blocked delete, 500 storage down). Malformed request bodies
    are reported as 400 ``ValidationError``; anything unexpected becomes a
    500 without leaking the exception text.
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        # Reference and guard failures are client errors, logged as warnings
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{exc.__class__.__name__}: {exc.message}",
            extra={"status_code": exc.status_code, "details": exc.details, **_request_context(request)}
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.__class__.__name__, exc.message, exc.details)
        )

    @app.exception_handler(RequestValidationError)
    async def request_body_error_handler(request: Request, exc: RequestValidationError):
        """Missing or mistyped body fields (e.g. no ``age``, negative ``age``)."""
        errors = exc.errors()
        logger.warning(f"Rejected request body: {len(errors)} error(s)", extra=_request_context(request))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("ValidationError", "Request validation failed", {"errors": errors})
        )

    @app.exception_handler(StarletteHTTPException)
    async def routing_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes and unsupported methods."""
        logger.warning(f"HTTP {exc.status_code}: {exc.detail}", extra=_request_context(request))
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body("HTTPException", exc.detail)
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True, extra=_request_context(request))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("InternalServerError", "An unexpected error occurred")
        )
