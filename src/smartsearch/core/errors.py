"""SmartSearch error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Search
- 4xxx: Encoder
- 5xxx: Notes
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003
    CONFIG_FILE_NOT_FOUND = 2004

    # Search (3xxx)
    SEARCH_ENTRY_NOT_FOUND = 3001
    SEARCH_INVALID_QUERY = 3002
    SEARCH_INVALID_OPTION = 3003

    # Encoder (4xxx)
    ENCODER_UNAVAILABLE = 4001

    # Notes (5xxx)
    NOTE_OUTSIDE_VAULT = 5001
    NOTE_NOT_FOUND = 5002
    NOTE_UNREADABLE = 5003


@dataclass(frozen=True, slots=True)
class SmartSearchError(Exception):
    """Base error with structured context for tool responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SEARCH_ENTRY_NOT_FOUND')."""
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


class ConfigError(SmartSearchError):
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
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class SearchError(SmartSearchError):
    """Ranking errors surfaced to callers."""

    @classmethod
    def entry_not_found(cls, path: str) -> "SearchError":
        return cls(
            code=ErrorCode.SEARCH_ENTRY_NOT_FOUND,
            message=f"No embedding found for '{path}'",
            details={"path": path},
        )

    @classmethod
    def invalid_query(cls, reason: str) -> "SearchError":
        return cls(
            code=ErrorCode.SEARCH_INVALID_QUERY,
            message=f"Invalid query: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def invalid_option(cls, option: str, value: Any, reason: str) -> "SearchError":
        return cls(
            code=ErrorCode.SEARCH_INVALID_OPTION,
            message=f"Invalid value for '{option}': {reason}",
            details={"option": option, "value": str(value), "reason": reason},
        )


class EncoderError(SmartSearchError):
    """Query encoder could not be created."""

    @classmethod
    def unavailable(cls, model_id: str, reason: str) -> "EncoderError":
        return cls(
            code=ErrorCode.ENCODER_UNAVAILABLE,
            message=f"Encoder for '{model_id}' is unavailable: {reason}",
            details={"model_id": model_id, "reason": reason},
        )


class NoteError(SmartSearchError):
    """Note reading errors."""

    @classmethod
    def outside_vault(cls, path: str, vault_root: str) -> "NoteError":
        return cls(
            code=ErrorCode.NOTE_OUTSIDE_VAULT,
            message=f"Path '{path}' resolves outside the vault",
            details={"path": path, "vault_root": vault_root},
        )

    @classmethod
    def not_found(cls, path: str) -> "NoteError":
        return cls(
            code=ErrorCode.NOTE_NOT_FOUND,
            message=f"Note not found: {path}",
            details={"path": path},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "NoteError":
        return cls(
            code=ErrorCode.NOTE_UNREADABLE,
            message=f"Cannot read note {path}: {reason}",
            details={"path": path, "reason": reason},
        )
