"""MCP tool handlers."""

from smartsearch.mcp.tools import notes, search

__all__ = ["notes", "search"]
