"""MCP server exposing vault search tools."""

from smartsearch.mcp.context import AppContext
from smartsearch.mcp.server import create_mcp_server, run_server

__all__ = ["AppContext", "create_mcp_server", "run_server"]
