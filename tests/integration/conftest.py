"""Fixtures for tests that run the real watchfiles watcher."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio

from mdx_include.cli.watch import DocsWatchSession
from mdx_include.config import Settings
from mdx_include.core.workspace import Workspace
from mdx_include.fs import LocalFileSystem
from mdx_include.watcher.watchfiles_adapter import WatchfilesWatcher


@pytest_asyncio.fixture
async def watched_session(docs_tree: Path) -> AsyncGenerator[DocsWatchSession, None]:
    """A linted docs tree with a running watcher feeding the session."""
    workspace = Workspace(LocalFileSystem(), Settings(debounce_seconds=0.05))
    session = DocsWatchSession(workspace, docs_tree)
    await session.lint_all()
    watcher = WatchfilesWatcher(docs_tree, session.on_change)
    await watcher.start()
    try:
        yield session
    finally:
        await watcher.stop()
        await session.debouncer.cancel_all()
        workspace.close()
