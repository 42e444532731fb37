"""
Domain exceptions raised by the service layer.

The API layer maps them to HTTP responses (see lichsu.main):
- ValidationError    -> 400
- NotFoundError      -> 404
- ConflictError      -> 400 with the dependency payload
- TransactionFailure -> 500, retryable
"""
from typing import Any, Optional


class ContentIntegrityError(Exception):
    """Base class for all service-layer errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ContentIntegrityError):
    """Malformed input; nothing was written."""

    status_code = 400


class NotFoundError(ContentIntegrityError):
    """The referenced period or entity does not exist."""

    status_code = 404


class ConflictError(ContentIntegrityError):
    """Deletion blocked by live dependents. Carries the full payload."""

    status_code = 400

    def __init__(self, message: str, payload: Any):
        super().__init__(message)
        self.payload = payload


class TransactionFailure(ContentIntegrityError):
    """The database transaction could not commit and was rolled back."""

    status_code = 500
    retryable = True

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
