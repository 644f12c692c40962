"""
Request logging middleware.
Logs method, path, status code and duration of every request.
"""
import logging
import time

from fastapi import FastAPI, Request

from staff_api.utils.logger import log_api_response

logger = logging.getLogger(__name__)


def add_request_logging(app: FastAPI) -> None:
    """
    Register the request logging middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        log_api_response(logger, request.method, request.url.path, response.status_code, duration_ms)
        return response
