"""
HTTP middleware: exception handlers and request logging.
"""
from .error_handler import add_exception_handlers
from .request_logging import add_request_logging

__all__ = ["add_exception_handlers", "add_request_logging"]
