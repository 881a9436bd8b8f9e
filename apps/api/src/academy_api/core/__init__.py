"""
Core module - Configuration, database, errors, and upload handling.
"""

from academy_api.core.config import get_settings, settings
from academy_api.core.database import Base, close_db, get_db, init_db
from academy_api.core.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    ServiceError,
    StorageFailureError,
    UploadRejectedError,
    ValidationFailedError,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    # Errors
    "ServiceError",
    "ValidationFailedError",
    "RecordNotFoundError",
    "DuplicateRecordError",
    "StorageFailureError",
    "UploadRejectedError",
]
