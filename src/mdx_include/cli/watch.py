import asyncio
import os
from pathlib import Path
from typing import Annotated

import typer

from mdx_include.cli.common import collect_documents, console, get_workspace
from mdx_include.core.debounce import Debouncer
from mdx_include.core.workspace import Workspace, load_document

_ALL_DOCUMENTS = "*"


class DocsWatchSession:
    """Keeps diagnostics for a docs tree current while files change."""

    def __init__(self, workspace: Workspace, directory: Path) -> None:
        self.workspace = workspace
        self.directory = directory
        self.debouncer = Debouncer(workspace.settings.debounce_seconds, self._relint)

    def documents(self) -> list[Path]:
        return collect_documents([self.directory], self.workspace.settings)

    async def lint_all(self) -> None:
        for path in self.documents():
            await self._lint_one(path)

    async def on_change(self, paths: set[Path]) -> None:
        self.workspace.files_changed(str(p) for p in paths)
        other_changed = False
        for path in paths:
            if self.workspace.settings.is_document(path):
                self.debouncer.schedule(str(path), path)
            else:
                other_changed = True
        # A referenced file appeared or vanished: every document may be affected.
        if other_changed:
            self.debouncer.schedule(_ALL_DOCUMENTS, None)

    async def _relint(self, path: Path | None) -> None:
        if path is None:
            await self.lint_all()
        else:
            await self._lint_one(path)

    async def _lint_one(self, path: Path) -> None:
        if not path.exists():
            self.workspace.diagnostics.delete(os.path.abspath(path))
            return
        try:
            document = load_document(path)
        except UnicodeDecodeError:
            console.print(f"[yellow]Skipping {path}: not valid UTF-8[/yellow]")
            return
        except OSError as exc:
            console.print(f"[yellow]Skipping {path}: {exc.strerror or exc}[/yellow]")
            return
        previous = self.workspace.diagnostics.get(document.path)
        diagnostics = self.workspace.lint(document)
        if diagnostics == previous:
            return
        if not diagnostics:
            console.print(f"[green]{path}: references OK[/green]")
        for diagnostic in diagnostics:
            start = diagnostic.range.start
            console.print(f"[red]{path}:{start.line + 1}:{start.character + 1}[/red] {diagnostic.message}")


def watch(
    directory: Annotated[Path, typer.Argument(help="Docs directory to watch.")] = Path("."),
    root: Annotated[Path | None, typer.Option(help="Root directory override.")] = None,
    marker: Annotated[str | None, typer.Option(help="Root marker filename (default mkdocs.yml).")] = None,
) -> None:
    """Lint a docs tree and re-lint it as files change."""
    from mdx_include.watcher.watchfiles_adapter import WatchfilesWatcher

    workspace = get_workspace(root, marker)
    session = DocsWatchSession(workspace, directory)

    async def _run() -> None:
        watcher = WatchfilesWatcher(directory, session.on_change)
        await session.lint_all()
        await watcher.start()
        console.print(f"[green]Watching {directory}[/green] (Ctrl+C to stop)")
        try:
            await watcher.wait()
        finally:
            await watcher.stop()
            await session.debouncer.cancel_all()
            workspace.close()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("Stopped.")
