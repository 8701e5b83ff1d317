from app.errors.alert import (
    BadRequestAlertError,
    ForbiddenError,
    bad_request_alert_exception_handler,
    forbidden_exception_handler,
)
from app.errors.auth import UserAuthenticationError, auth_exception_handler
from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from app.errors.validation import validation_exception_handler

__all__ = [
    "BadRequestAlertError",
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "ForbiddenError",
    "RecordNotFoundError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "bad_request_alert_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "forbidden_exception_handler",
    "validation_exception_handler",
]
