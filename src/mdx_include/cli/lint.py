from pathlib import Path
from typing import Annotated

import typer

from mdx_include.cli.common import collect_documents, console, get_workspace, render_table
from mdx_include.core.workspace import load_document


def lint(
    paths: Annotated[list[Path], typer.Argument(help="Markdown files or directories to lint.")],
    root: Annotated[Path | None, typer.Option(help="Root directory override for all documents.")] = None,
    marker: Annotated[str | None, typer.Option(help="Root marker filename (default mkdocs.yml).")] = None,
    json: Annotated[bool, typer.Option("--json", help="Print diagnostics as JSON.")] = False,
) -> None:
    """Report references to files that do not exist."""
    workspace = get_workspace(root, marker)
    rows: list[tuple[str, int, int, str]] = []
    report: dict[str, list[dict[str, object]]] = {}

    for path in collect_documents(paths, workspace.settings):
        try:
            document = load_document(path)
        except UnicodeDecodeError:
            console.print(f"[yellow]Skipping {path}: not valid UTF-8[/yellow]")
            continue
        except OSError as exc:
            console.print(f"[yellow]Skipping {path}: {exc.strerror or exc}[/yellow]")
            continue
        diagnostics = workspace.lint(document)
        if diagnostics:
            report[str(path)] = [d.model_dump() for d in diagnostics]
        for diagnostic in diagnostics:
            start = diagnostic.range.start
            rows.append((str(path), start.line + 1, start.character + 1, diagnostic.message))

    if json:
        console.print_json(data=report)
    elif rows:
        render_table(["file", "line", "column", "message"], rows)
    else:
        console.print("[green]No broken references.[/green]")

    if rows:
        raise typer.Exit(1)
