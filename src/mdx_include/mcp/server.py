"""FastMCP server exposing reference checking and path completion."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from mdx_include.core.workspace import Workspace, load_document
from mdx_include.models import Document, Position


def _open(path: str, text: str | None) -> Document:
    try:
        return load_document(path, text)
    except (OSError, UnicodeDecodeError) as exc:
        raise ToolError(f"Cannot read {path}: {exc}") from None


def create_mcp_server(workspace: Workspace) -> FastMCP:
    """Create a FastMCP server wired to the given workspace."""

    mcp = FastMCP(
        "mdx-include",
        instructions="Resolve, validate and complete {* path ln[..] hl[..] *} file references in Markdown.",
    )

    @mcp.tool()
    async def lint_document(path: str, text: str | None = None) -> list[dict[str, Any]]:
        """Report references to files that do not exist."""
        return [d.model_dump() for d in workspace.lint(_open(path, text))]

    @mcp.tool()
    async def find_references(path: str, text: str | None = None) -> list[dict[str, Any]]:
        """List the references of a document with resolved paths and ranges."""
        return [r.model_dump() for r in workspace.resolve(_open(path, text))]

    @mcp.tool()
    async def document_links(path: str, text: str | None = None) -> list[dict[str, Any]]:
        """List navigation targets and tooltips for existing references."""
        return [link.model_dump() for link in workspace.links(_open(path, text))]

    @mcp.tool()
    async def complete_path(path: str, line: int, character: int, text: str | None = None) -> list[dict[str, Any]]:
        """Suggest file and directory names at a zero-based cursor position."""
        position = Position(line=line, character=character)
        candidates = await workspace.complete(_open(path, text), position)
        return [c.model_dump() for c in candidates or []]

    @mcp.tool()
    async def find_root(directory: str) -> str | None:
        """Return the nearest directory above ``directory`` holding the root marker."""
        return workspace.find_root(directory)

    return mcp
