from __future__ import annotations

from collections.abc import AsyncIterator

from mdx_include.core.workspace import Workspace

_workspace: Workspace | None = None


def set_workspace(workspace: Workspace) -> None:
    global _workspace  # noqa: PLW0603
    _workspace = workspace


async def get_workspace() -> AsyncIterator[Workspace]:
    """Yield the process-wide ``Workspace``, creating it lazily on first call."""
    global _workspace  # noqa: PLW0603
    if _workspace is None:
        from mdx_include.config import load_settings
        from mdx_include.fs.local import LocalFileSystem

        _workspace = Workspace(LocalFileSystem(), load_settings())
    yield _workspace


def shutdown_workspace() -> None:
    global _workspace  # noqa: PLW0603
    if _workspace is not None:
        _workspace.close()
        _workspace = None
