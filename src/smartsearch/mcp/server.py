"""FastMCP server creation and wiring.

The server speaks MCP over stdio, so every log line goes to stderr or a file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from smartsearch.config.models import SmartSearchConfig
    from smartsearch.mcp.context import AppContext

log = structlog.get_logger(__name__)

SERVER_NAME = "smart-search"

INSTRUCTIONS = (
    "Semantic search over an Obsidian vault using the embeddings that the "
    "Smart Connections plugin already computed. Use semantic_search for a "
    "natural-language query, find_related to expand from a known note, and "
    "read_note to fetch the text of a result."
)


def create_mcp_server(context: AppContext) -> FastMCP:
    """Create FastMCP server with all tools wired to context.

    Args:
        context: AppContext with the collection store, encoder and note reader

    Returns:
        Configured FastMCP server ready to run
    """
    from fastmcp import FastMCP

    from smartsearch.mcp.tools import notes, search

    log.info("mcp_server_creating", vault_root=str(context.vault_root))

    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)

    search.register_tools(mcp, context)
    notes.register_tools(mcp, context)

    log.info("mcp_server_created", records=len(context.store.snapshot))

    return mcp


def run_server(config: SmartSearchConfig) -> None:
    """Create and run the MCP server over stdio."""
    from smartsearch.core.logging import configure_logging
    from smartsearch.mcp.context import AppContext

    configure_logging(config=config.logging)

    log.info("mcp_server_starting", vault_root=config.vault.path)

    context = AppContext.create(config)
    if not context.store.snapshot:
        log.warning(
            "collection.empty",
            vault_root=str(context.vault_root),
            hint="Enable the Smart Connections plugin and let it finish indexing",
        )

    mcp = create_mcp_server(context)

    log.info("mcp_server_running")
    mcp.run()
