"""Shared plumbing for text-returning tools.

Every tool returns plain text. Failures are rendered as an error line rather
than raised, so one bad call never ends the client's session.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import structlog

from smartsearch.core.errors import SmartSearchError
from smartsearch.core.logging import clear_request_id, set_request_id

log = structlog.get_logger(__name__)


@dataclass
class ToolOutput:
    """Rendered tool text plus metrics for the completion log line."""

    text: str
    summary: dict[str, Any] = field(default_factory=dict)


def _extract_log_params(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Keep non-None params, truncating long strings."""
    params: dict[str, Any] = {}
    for key, value in kwargs.items():
        if isinstance(value, str) and len(value) > 50:
            params[key] = value[:50] + "..."
        elif value is not None:
            params[key] = value
    return params


def error_text(tool_name: str, error: BaseException) -> str:
    message = error.message if isinstance(error, SmartSearchError) else str(error)
    return f"Error running {tool_name}: {message}"


async def run_tool(
    tool_name: str,
    params: dict[str, Any],
    body: Callable[[], Awaitable[ToolOutput]],
) -> str:
    """Run a tool body with request correlation, two-phase logging and error rendering."""
    set_request_id()
    start_time = time.perf_counter()
    log.info("tool_start", tool=tool_name, **_extract_log_params(params))

    try:
        output = await body()
        log.info(
            "tool_complete",
            tool=tool_name,
            elapsed_ms=int((time.perf_counter() - start_time) * 1000),
            **output.summary,
        )
        return output.text
    except SmartSearchError as e:
        # Expected error - log warning, no traceback
        log.warning(
            "tool_error",
            tool=tool_name,
            error_code=e.code.value,
            error=e.message,
            elapsed_ms=int((time.perf_counter() - start_time) * 1000),
        )
        return error_text(tool_name, e)
    except Exception as e:
        log.error(
            "tool_internal_error",
            tool=tool_name,
            error=str(e),
            elapsed_ms=int((time.perf_counter() - start_time) * 1000),
        )
        # Full traceback at DEBUG level (file outputs only by default)
        log.debug("tool_internal_error_traceback", tool=tool_name, exc_info=True)
        return error_text(tool_name, e)
    finally:
        clear_request_id()
