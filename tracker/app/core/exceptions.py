"""
Custom exceptions for the parcel storage layer.

Storage engine failures (SQLAlchemy errors) are never wrapped; only
conditions the caller must tell apart get their own exception type.
"""

from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""
    
    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when no parcel exists with the requested number."""
    
    def __init__(self, number: int):
        self.number = number
        super().__init__("Parcel", number)
