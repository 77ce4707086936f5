"""Tests for base-directory selection and reference resolution."""

from __future__ import annotations

from mdx_include.core.resolver import resolve_references, select_base_dir
from mdx_include.core.roots import RootResolver
from mdx_include.fs import InMemoryFileSystem
from mdx_include.models import Document


def test_path_resolves_against_discovered_root(project_fs: InMemoryFileSystem) -> None:
    document = Document(path="/proj/docs/guide/page.md", text="{* src/a.py ln[1:3] *}")
    (ref,) = resolve_references(document, project_fs, RootResolver(project_fs))
    assert ref.absolute_path == "/proj/src/a.py"
    assert ref.exists is True


def test_path_valid_only_relative_to_document_dir_is_missing(project_fs: InMemoryFileSystem) -> None:
    project_fs.add_file("/proj/docs/guide/local.py")
    document = Document(path="/proj/docs/guide/page.md", text="{* local.py *}")
    (ref,) = resolve_references(document, project_fs, RootResolver(project_fs))
    assert ref.absolute_path == "/proj/local.py"
    assert ref.exists is False


def test_falls_back_to_document_dir_without_marker() -> None:
    fs = InMemoryFileSystem(files=["/notes/page.md", "/notes/img/a.png"])
    document = Document(path="/notes/page.md", text="{* img/a.png *}")
    (ref,) = resolve_references(document, fs, RootResolver(fs))
    assert ref.absolute_path == "/notes/img/a.png"
    assert ref.exists is True


def test_override_supersedes_root_search(project_fs: InMemoryFileSystem) -> None:
    project_fs.add_file("/elsewhere/src/a.py")
    roots = RootResolver(project_fs)
    document = Document(path="/proj/docs/guide/page.md", text="{* src/a.py *}")

    (ref,) = resolve_references(document, project_fs, roots, root_override="/elsewhere")
    assert ref.absolute_path == "/elsewhere/src/a.py"
    assert project_fs.exists_calls["/proj/mkdocs.yml"] == 0


def test_parent_segments_are_normalized(project_fs: InMemoryFileSystem) -> None:
    project_fs.add_file("/shared/x.py")
    document = Document(path="/proj/docs/page.md", text="{* ../shared/x.py *}")
    (ref,) = resolve_references(document, project_fs, RootResolver(project_fs))
    assert ref.absolute_path == "/shared/x.py"
    assert ref.exists is True


def test_directory_target_counts_as_existing(project_fs: InMemoryFileSystem) -> None:
    document = Document(path="/proj/docs/page.md", text="{* src/sub *}")
    (ref,) = resolve_references(document, project_fs, RootResolver(project_fs))
    assert ref.exists is True


def test_resolved_reference_keeps_parsed_fields(project_fs: InMemoryFileSystem) -> None:
    document = Document(path="/proj/docs/page.md", text="x {* src/a.py ln[2] hl[3] *}")
    (ref,) = resolve_references(document, project_fs, RootResolver(project_fs))
    assert ref.file_path == "src/a.py"
    assert ref.span.start == 2
    assert ref.line_ranges is not None and ref.highlight_ranges is not None


def test_document_without_references_does_not_touch_filesystem(project_fs: InMemoryFileSystem) -> None:
    document = Document(path="/proj/docs/page.md", text="# Nothing here\n")
    assert resolve_references(document, project_fs, RootResolver(project_fs)) == []
    assert project_fs.probe_count == 0


def test_select_base_dir(project_fs: InMemoryFileSystem) -> None:
    roots = RootResolver(project_fs)
    assert select_base_dir("/proj/docs/guide", roots) == "/proj"
    assert select_base_dir("/proj/docs/guide", roots, "/override") == "/override"

    loose = InMemoryFileSystem(directories=["/tmp/notes"])
    assert select_base_dir("/tmp/notes", RootResolver(loose)) == "/tmp/notes"
