"""Commands that show how a single document's references resolve."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from mdx_include.cli.common import console, get_workspace, read_document, render_table
from mdx_include.core.ranges import format_ranges
from mdx_include.models import Position

_RootOption = Annotated[Path | None, typer.Option(help="Root directory override.")]
_MarkerOption = Annotated[str | None, typer.Option(help="Root marker filename (default mkdocs.yml).")]


def refs(
    path: Annotated[Path, typer.Argument(help="Markdown document.")],
    root: _RootOption = None,
    marker: _MarkerOption = None,
) -> None:
    """List the references of a document and where they resolve."""
    workspace = get_workspace(root, marker)
    document = read_document(path)
    rows = []
    for ref in workspace.resolve(document):
        position = document.position_at(ref.span.start)
        rows.append(
            (
                position.line + 1,
                ref.file_path,
                ref.absolute_path,
                "yes" if ref.exists else "[red]no[/red]",
                format_ranges(ref.line_ranges) if ref.line_ranges is not None else "",
                format_ranges(ref.highlight_ranges) if ref.highlight_ranges is not None else "",
            )
        )
    render_table(["line", "path", "resolved", "exists", "ln", "hl"], rows)


def links(
    path: Annotated[Path, typer.Argument(help="Markdown document.")],
    root: _RootOption = None,
    marker: _MarkerOption = None,
) -> None:
    """List navigation targets with their tooltips."""
    workspace = get_workspace(root, marker)
    document = read_document(path)
    rows = [(link.range.start.line + 1, link.target, link.tooltip) for link in workspace.links(document)]
    render_table(["line", "target", "tooltip"], rows)


def complete(
    path: Annotated[Path, typer.Argument(help="Markdown document.")],
    line: Annotated[int, typer.Option(min=1, help="Cursor line (1-based).")],
    column: Annotated[int, typer.Option(min=1, help="Cursor column (1-based).")],
    root: _RootOption = None,
    marker: _MarkerOption = None,
) -> None:
    """Show path completions at a cursor position."""
    workspace = get_workspace(root, marker)
    document = read_document(path)
    position = Position(line=line - 1, character=column - 1)
    candidates = asyncio.run(workspace.complete(document, position))
    if candidates is None:
        console.print("No suggestions at this position.")
        return
    render_table(["insert", "kind", "documentation"], [(c.insert_text, c.kind, c.documentation) for c in candidates])


def root(
    directory: Annotated[Path, typer.Argument(help="Directory to start the search from.")] = Path("."),
    marker: _MarkerOption = None,
) -> None:
    """Print the nearest project root above a directory."""
    workspace = get_workspace(None, marker)
    found = workspace.find_root(str(directory))
    if found is None:
        console.print(f"[yellow]No {workspace.settings.marker_filename} found above {directory}[/yellow]")
        raise typer.Exit(1)
    console.print(found)
