"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from mdx_include.core.workspace import Workspace
from mdx_include.fs import InMemoryFileSystem

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

PROJECT_FILES = [
    "/proj/mkdocs.yml",
    "/proj/src/a.py",
    "/proj/src/b.md",
    "/proj/src/sub/c.py",
    "/proj/docs/guide/page.md",
]


@pytest.fixture
def project_fs() -> InMemoryFileSystem:
    """An in-memory project rooted at /proj (marker: mkdocs.yml)."""
    return InMemoryFileSystem(files=PROJECT_FILES)


@pytest.fixture
def workspace(project_fs: InMemoryFileSystem) -> Workspace:
    return Workspace(project_fs)


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """A real project on disk: mkdocs.yml, one source file and one docs page."""
    (tmp_path / "mkdocs.yml").write_text("site_name: test\n", encoding="utf-8")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("print('hi')\n", encoding="utf-8")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "index.md").write_text(
        "# Title\n\n{* src/app.py ln[1] *}\n\n{* src/missing.py *}\n",
        encoding="utf-8",
    )
    return tmp_path
