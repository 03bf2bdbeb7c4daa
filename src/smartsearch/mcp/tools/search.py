"""Search MCP tools - semantic_search, find_related, vault_stats, reload_embeddings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import Field

from smartsearch.config.constants import NOTE_PATH_MAX_CHARS, QUERY_MAX_CHARS
from smartsearch.core.formatting import format_hits, format_stats, pluralize, truncate_query
from smartsearch.index.models import SearchOptions
from smartsearch.index.ranking import collection_stats, find_similar, search
from smartsearch.mcp.tools.base import ToolOutput, run_tool

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from smartsearch.mcp.context import AppContext

KindParam = Literal["document", "section", "source", "block"]


# =============================================================================
# Handlers
# =============================================================================


async def semantic_search_tool(
    app_ctx: AppContext,
    query: str,
    limit: int | None = None,
    threshold: float | None = None,
    kind: str | None = None,
    folder: str | None = None,
) -> str:
    async def body() -> ToolOutput:
        defaults = app_ctx.config.search
        hits = await search(
            query,
            app_ctx.store.snapshot,
            app_ctx.encoder,
            SearchOptions(limit=limit, threshold=threshold, kind=kind, path_prefix=folder),
            default_limit=defaults.default_limit,
            default_threshold=defaults.default_threshold,
        )
        return ToolOutput(format_hits(hits), {"results": len(hits)})

    params = {
        "query": truncate_query(query) if isinstance(query, str) else query,
        "limit": limit,
        "threshold": threshold,
        "kind": kind,
        "folder": folder,
    }
    return await run_tool("semantic_search", params, body)


async def find_related_tool(
    app_ctx: AppContext,
    note_path: str,
    limit: int | None = None,
    threshold: float | None = None,
    kind: str | None = None,
) -> str:
    async def body() -> ToolOutput:
        defaults = app_ctx.config.search
        hits = find_similar(
            note_path,
            app_ctx.store.snapshot,
            SearchOptions(limit=limit, threshold=threshold, kind=kind),
            default_limit=defaults.default_limit,
            default_threshold=defaults.default_threshold,
        )
        return ToolOutput(format_hits(hits), {"results": len(hits)})

    params = {"note_path": note_path, "limit": limit, "threshold": threshold, "kind": kind}
    return await run_tool("find_related", params, body)


async def vault_stats_tool(app_ctx: AppContext) -> str:
    async def body() -> ToolOutput:
        stats = collection_stats(app_ctx.store.snapshot, model_id=app_ctx.config.encoder.model_id)
        return ToolOutput(
            format_stats(stats),
            {"documents": stats.document_count, "sections": stats.section_count},
        )

    return await run_tool("vault_stats", {}, body)


async def reload_embeddings_tool(app_ctx: AppContext) -> str:
    async def body() -> ToolOutput:
        collection = await app_ctx.store.areload()
        stats = collection_stats(collection, model_id=app_ctx.config.encoder.model_id)
        text = (
            f"Reloaded {pluralize(stats.document_count, 'note')} and "
            f"{pluralize(stats.section_count, 'block')}."
        )
        return ToolOutput(text, {"records": len(collection)})

    return await run_tool("reload_embeddings", {}, body)


# =============================================================================
# Tool Registration
# =============================================================================


def register_tools(mcp: FastMCP, app_ctx: AppContext) -> None:
    """Register search tools with FastMCP server."""

    @mcp.tool
    async def semantic_search(
        query: str = Field(
            ...,
            min_length=1,
            max_length=QUERY_MAX_CHARS,
            description="Natural-language search query",
        ),
        limit: int | None = Field(None, description="Maximum results (default 10, max 100)"),
        threshold: float | None = Field(
            None, description="Minimum cosine similarity in [-1, 1] (default 0.3)"
        ),
        kind: KindParam | None = Field(
            None, description="Only whole notes ('document') or heading blocks ('section')"
        ),
        folder: str | None = Field(
            None, description="Only paths starting with this prefix (case-insensitive)"
        ),
    ) -> str:
        """Search vault notes semantically using a natural-language query."""
        return await semantic_search_tool(app_ctx, query, limit, threshold, kind, folder)

    @mcp.tool
    async def find_related(
        note_path: str = Field(
            ...,
            min_length=1,
            max_length=NOTE_PATH_MAX_CHARS,
            description="Vault-relative note path, or note#Heading for a block",
        ),
        limit: int | None = Field(None, description="Maximum results (default 10, max 100)"),
        threshold: float | None = Field(
            None, description="Minimum cosine similarity in [-1, 1] (default 0.3)"
        ),
        kind: KindParam | None = Field(
            None, description="Only whole notes ('document') or heading blocks ('section')"
        ),
    ) -> str:
        """Find notes related to a specific note by path."""
        return await find_related_tool(app_ctx, note_path, limit, threshold, kind)

    @mcp.tool
    async def vault_stats() -> str:
        """Return summary statistics about the loaded vault embeddings."""
        return await vault_stats_tool(app_ctx)

    @mcp.tool
    async def reload_embeddings() -> str:
        """Re-read the vault's Smart Connections embeddings from disk."""
        return await reload_embeddings_tool(app_ctx)
