"""apiref error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Lookup (not found)
- 4xxx: Invalid input
- 5xxx: Malformed type info
- 9xxx: Internal

Not-found and invalid-input errors are meant for the caller and may be
forwarded verbatim. Everything else is an internal defect.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2003

    # Lookup (3xxx)
    SYMBOL_NOT_FOUND = 3001
    FIELD_NOT_FOUND = 3002
    SYMBOL_NOT_PUBLIC = 3003
    MODULE_NOT_FOUND = 3004
    CORPUS_NOT_FOUND = 3005

    # Input (4xxx)
    INVALID_FRAMEWORK = 4001
    INVALID_VERSION = 4002
    INVALID_QUERY = 4003

    # Type info (5xxx)
    TYPE_INFO_MISSING_MODULE = 5001
    TYPE_INFO_KIND_MISMATCH = 5002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001
    INDEX_INTEGRITY = 9002
    DOCUMENT_LOAD_FAILED = 9003
    INDEX_LOAD_FAILED = 9004


@dataclass(frozen=True, slots=True)
class ApiRefError(Exception):
    """Base error with structured context for tool responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SYMBOL_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(ApiRefError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class NotFoundError(ApiRefError):
    """A query or field could not be resolved, or the symbol is not public API."""

    @classmethod
    def symbol_not_found(cls, query: str) -> "NotFoundError":
        return cls(
            code=ErrorCode.SYMBOL_NOT_FOUND,
            message=f"Could not find symbol for query '{query}'",
            details={"query": query},
        )

    @classmethod
    def field_not_found(cls, field: str, symbol: str, library: str) -> "NotFoundError":
        return cls(
            code=ErrorCode.FIELD_NOT_FOUND,
            message=f"Could not find field '{field}' in symbol '{symbol}' of library '{library}'",
            details={"field": field, "symbol": symbol, "library": library},
        )

    @classmethod
    def not_public(cls, symbol: str) -> "NotFoundError":
        return cls(
            code=ErrorCode.SYMBOL_NOT_PUBLIC,
            message=f"Symbol '{symbol}' is not public API",
            details={"symbol": symbol},
        )

    @classmethod
    def module_not_found(cls, module: str) -> "NotFoundError":
        return cls(
            code=ErrorCode.MODULE_NOT_FOUND,
            message=f"Could not find symbol for module '{module}'",
            details={"module": module},
        )

    @classmethod
    def corpus_not_found(cls, framework: str, version: str, path: str) -> "NotFoundError":
        return cls(
            code=ErrorCode.CORPUS_NOT_FOUND,
            message=f"No API reference data for {framework} {version} at {path}",
            details={"framework": framework, "version": version, "path": path},
        )


class InvalidInputError(ApiRefError):
    """Caller supplied a framework, version or query that cannot be used."""

    @classmethod
    def invalid_framework(cls, framework: str) -> "InvalidInputError":
        return cls(
            code=ErrorCode.INVALID_FRAMEWORK,
            message=f'Invalid framework name: {framework}. Expected "OpenUI5" or "SAPUI5".',
            details={"framework": framework},
        )

    @classmethod
    def invalid_version(cls, version: str) -> "InvalidInputError":
        return cls(
            code=ErrorCode.INVALID_VERSION,
            message=f"Invalid framework version: {version}",
            details={"version": version},
        )

    @classmethod
    def invalid_query(cls, query: str, reason: str) -> "InvalidInputError":
        return cls(
            code=ErrorCode.INVALID_QUERY,
            message=f"Invalid query '{query}': {reason}",
            details={"query": query, "reason": reason},
        )


class TypeInfoError(ApiRefError):
    """Type info tree from the analyzer cannot be mapped onto a symbol."""

    @classmethod
    def missing_module(cls, node_name: str) -> "TypeInfoError":
        return cls(
            code=ErrorCode.TYPE_INFO_MISSING_MODULE,
            message="Could not extract module name from type info",
            details={"node": node_name},
        )

    @classmethod
    def kind_mismatch(cls, expected: str, actual: str) -> "TypeInfoError":
        return cls(
            code=ErrorCode.TYPE_INFO_KIND_MISMATCH,
            message=f"Expected API reference to be {expected}, but got {actual}",
            details={"expected": expected, "actual": actual},
        )


class InternalError(ApiRefError):
    """Internal/unexpected errors."""

    @classmethod
    def integrity_fault(cls, name: str, document: str) -> "InternalError":
        return cls(
            code=ErrorCode.INDEX_INTEGRITY,
            message=f"Failed to find indexed symbol '{name}' in API JSON file '{document}'",
            details={"name": name, "document": document},
        )

    @classmethod
    def document_load_failed(cls, path: str, reason: str) -> "InternalError":
        return cls(
            code=ErrorCode.DOCUMENT_LOAD_FAILED,
            message=f"Failed to read API JSON file at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def index_load_failed(cls, path: str, reason: str) -> "InternalError":
        return cls(
            code=ErrorCode.INDEX_LOAD_FAILED,
            message=f"Failed to read API reference index at {path}: {reason}",
            details={"path": path, "reason": reason},
        )


def is_client_error(error: BaseException) -> bool:
    """True for errors that are the caller's to fix and can be forwarded as-is."""
    return isinstance(error, NotFoundError | InvalidInputError)
