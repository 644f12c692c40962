"""
Custom exceptions package.
"""
from staff_api.exceptions.custom_exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ConflictError,
    DatabaseError,
    validate_required_fields
)

__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "DatabaseError",
    "validate_required_fields"
]
