"""Core module exports."""

from smartsearch.core.errors import (
    ConfigError,
    EncoderError,
    ErrorCode,
    NoteError,
    SearchError,
    SmartSearchError,
)
from smartsearch.core.logging import (
    clear_request_id,
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "EncoderError",
    "ErrorCode",
    "NoteError",
    "SearchError",
    "SmartSearchError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_request_id",
    "set_request_id",
]
