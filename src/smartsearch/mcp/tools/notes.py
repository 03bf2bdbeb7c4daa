"""Note MCP tool - read_note."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from smartsearch.config.constants import NOTE_PATH_MAX_CHARS
from smartsearch.core.formatting import format_note
from smartsearch.mcp.tools.base import ToolOutput, run_tool

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from smartsearch.mcp.context import AppContext


async def read_note_tool(app_ctx: AppContext, note_path: str) -> str:
    async def body() -> ToolOutput:
        note = await app_ctx.note_reader.aread(note_path)
        return ToolOutput(
            format_note(note),
            {"chars": len(note.content), "truncated": note.truncated},
        )

    return await run_tool("read_note", {"note_path": note_path}, body)


def register_tools(mcp: FastMCP, app_ctx: AppContext) -> None:
    """Register note tools with FastMCP server."""

    @mcp.tool
    async def read_note(
        note_path: str = Field(
            ...,
            min_length=1,
            max_length=NOTE_PATH_MAX_CHARS,
            description="Vault-relative note path; a #Heading fragment is ignored",
        ),
    ) -> str:
        """Read the text of a vault note, truncated for very large notes."""
        return await read_note_tool(app_ctx, note_path)
