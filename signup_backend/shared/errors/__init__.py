from .base import (
    AppError,
    ConfigurationError,
    DomainError,
    NotFoundError,
    UnsupportedExportFormatError,
    UserIdRequiredError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "ConfigurationError",
    "DomainError",
    "NotFoundError",
    "UnsupportedExportFormatError",
    "UserIdRequiredError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
