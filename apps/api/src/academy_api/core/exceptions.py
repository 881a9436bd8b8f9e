"""
Service Exceptions

Error taxonomy shared by all modules. Services raise these; routers convert
them to HTTPExceptions with `to_http_exception`, and the app-level handlers
in error_handlers.py render them as flat JSON bodies.
"""

from fastapi import HTTPException, status


class ServiceError(Exception):
    """Base exception for service-layer errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 400,
        errors: list[str] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.errors = errors
        super().__init__(message)

    def to_detail(self) -> dict:
        """Build the JSON error body for this error."""
        detail: dict = {
            "success": False,
            "error": self.error_code,
            "message": self.message,
        }
        if self.errors is not None:
            detail["errors"] = self.errors
        return detail


class ValidationFailedError(ServiceError):
    """Raised when required fields are missing or a constraint is violated."""

    def __init__(self, message: str = "Validation failed", errors: list[str] | None = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_FAILED",
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=errors or [],
        )


class RecordNotFoundError(ServiceError):
    """Raised when a referenced identifier has no matching record."""

    def __init__(self, message: str = "Record not found"):
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
        )


class DuplicateRecordError(ServiceError):
    """Raised when a unique key is already taken."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="DUPLICATE_RECORD",
            status_code=status.HTTP_409_CONFLICT,
        )


class StorageFailureError(ServiceError):
    """Raised when the persistence layer itself fails."""

    def __init__(self, message: str, reason: str | None = None):
        self.reason = reason
        super().__init__(
            message=message,
            error_code="STORAGE_FAILURE",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    def to_detail(self) -> dict:
        detail = super().to_detail()
        if self.reason:
            detail["reason"] = self.reason
        return detail


class UploadRejectedError(ServiceError):
    """Raised when an uploaded file fails the type filter or size ceiling."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(
            message=message,
            error_code="UPLOAD_REJECTED",
            status_code=status_code,
        )


def to_http_exception(e: ServiceError) -> HTTPException:
    """Convert a service error to an HTTPException."""
    return HTTPException(status_code=e.status_code, detail=e.to_detail())


def internal_error() -> HTTPException:
    """Generic 500 for unexpected failures."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "success": False,
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )
