from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from mdx_include.config import InvalidSettingsError, Settings, load_settings
from mdx_include.core.workspace import Workspace, load_document
from mdx_include.models import Document

console = Console()


def get_workspace(root: Path | None = None, marker: str | None = None) -> Workspace:
    from mdx_include.fs.local import LocalFileSystem

    try:
        settings = load_settings(root_dir=root, marker_filename=marker)
    except InvalidSettingsError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from None
    return Workspace(LocalFileSystem(), settings)


def collect_documents(paths: Sequence[Path], settings: Settings) -> list[Path]:
    """Expand directories into the Markdown files below them."""
    documents: list[Path] = []
    for path in paths:
        if path.is_dir():
            documents.extend(p for p in sorted(path.rglob("*")) if p.is_file() and settings.is_document(p))
        elif path.is_file():
            documents.append(path)
        else:
            console.print(f"[red]No such file or directory: {path}[/red]")
            raise typer.Exit(2)
    return documents


def render_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def read_document(path: Path) -> Document:
    try:
        return load_document(path)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Cannot read {path}: {exc}[/red]")
        raise typer.Exit(2) from None
