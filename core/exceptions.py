"""
Custom exception classes for robust error handling
"""
from typing import Any, Dict, Optional
from fastapi import status


class BaseCustomException(Exception):
    """Base custom exception class"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(BaseCustomException):
    """Raised when a requested resource is not found"""

    def __init__(self, resource: str, identifier: str, details: Optional[Dict[str, Any]] = None):
        message = f"{resource} with identifier '{identifier}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )


class AuthenticationError(BaseCustomException):
    """Raised when authentication fails"""

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details
        )


class ValidationError(BaseCustomException):
    """Raised when data validation fails"""

    def __init__(self, message: str, field: str = None, details: Optional[Dict[str, Any]] = None):
        if field:
            details = details or {}
            details["field"] = field

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details
        )


class RatingConflictError(BaseCustomException):
    """Raised when a user rates the same service a second time"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details
        )


class StoreError(BaseCustomException):
    """Base class for row store failures"""

    def __init__(self, resource: str, message: str, status_code: int, details: Optional[Dict[str, Any]] = None):
        self.resource = resource
        super().__init__(
            message=f"Store '{resource}' error: {message}",
            status_code=status_code,
            details=details
        )


class StoreReadError(StoreError):
    """Raised when reading rows from the store fails"""

    def __init__(self, resource: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(resource, message, status.HTTP_503_SERVICE_UNAVAILABLE, details)


class StoreWriteError(StoreError):
    """Raised when a store write fails for a reason other than a key conflict"""

    def __init__(self, resource: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(resource, message, status.HTTP_503_SERVICE_UNAVAILABLE, details)


class StoreConflictError(StoreError):
    """Raised when a store write violates a uniqueness constraint"""

    def __init__(self, resource: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(resource, message, status.HTTP_409_CONFLICT, details)


class UploadError(BaseCustomException):
    """Raised when an object store upload fails"""

    def __init__(self, filename: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.filename = filename
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )
