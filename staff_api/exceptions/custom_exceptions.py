"""
Errors raised by the services.
Each one carries the HTTP status it is reported with, so the error handlers
never need to know which operation failed.
"""
from typing import Optional, Any, Dict, Iterable


class AppError(Exception):
    """Base for every error the API reports with a JSON body."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Bad input: a missing required field or a name that resolves to nothing (400)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundError(AppError):
    """No record has the requested id (404). Malformed ids land here too."""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message, status_code=404, details={"resource": resource, "identifier": identifier})


class ConflictError(AppError):
    """Delete refused because another record still names this one (409)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=409, details=details)


class DatabaseError(AppError):
    """MongoDB is unreachable or the client was never connected (500)."""

    def __init__(self, message: str = "Database operation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


def validate_required_fields(data: Dict[str, Any], required_fields: Iterable[str]) -> None:
    """
    Raise ValidationError listing every required field that is absent or None.

    Empty strings count as present: ``managerName: ""`` is a valid value.
    """
    missing = [field for field in required_fields if data.get(field) is None]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            details={"missing_fields": missing}
        )
