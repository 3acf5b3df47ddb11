"""Core module exports."""

from apiref.core.errors import (
    ApiRefError,
    ConfigError,
    ErrorCode,
    InternalError,
    InvalidInputError,
    NotFoundError,
    TypeInfoError,
    is_client_error,
)
from apiref.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ApiRefError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "InvalidInputError",
    "NotFoundError",
    "TypeInfoError",
    "is_client_error",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
