"""Composition root shared by the CLI, the MCP server and the HTTP API."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from mdx_include.config import Settings
from mdx_include.core.completion import DirectoryListingCache, complete_path
from mdx_include.core.links import document_links
from mdx_include.core.ports.filesystem import FileSystem
from mdx_include.core.resolver import resolve_references, select_base_dir
from mdx_include.core.roots import RootResolver
from mdx_include.core.validator import DiagnosticStore, validate_references
from mdx_include.models import (
    CompletionCandidate,
    Diagnostic,
    Document,
    DocumentLink,
    Position,
    ResolvedReference,
)

logger = logging.getLogger(__name__)


def load_document(path: str | Path, text: str | None = None) -> Document:
    """Build a document from ``text``, reading the file when no text is given."""
    absolute = os.path.abspath(path)
    if text is None:
        text = Path(absolute).read_text(encoding="utf-8")
    return Document(path=absolute, text=text)


class Workspace:
    """Settings, filesystem and the process-wide caches, plus the operations
    every host surface calls."""

    def __init__(self, fs: FileSystem, settings: Settings | None = None) -> None:
        self.fs = fs
        self.settings = settings or Settings()
        self.roots = RootResolver(fs, self.settings.marker_filename)
        self.listings = DirectoryListingCache(fs)
        self.diagnostics = DiagnosticStore()

    @property
    def root_override(self) -> str | None:
        return self.settings.resolved_root_dir()

    def base_dir(self, document_dir: str) -> str:
        return select_base_dir(document_dir, self.roots, self.root_override)

    def find_root(self, start_dir: str) -> str | None:
        return self.roots.find_root(start_dir)

    def resolve(self, document: Document) -> list[ResolvedReference]:
        return resolve_references(document, self.fs, self.roots, self.root_override)

    def lint(self, document: Document) -> list[Diagnostic]:
        """Validate a document and store the result as its current diagnostics."""
        diagnostics = validate_references(document, self.resolve(document))
        self.diagnostics.set(document.path, diagnostics)
        return diagnostics

    def links(self, document: Document) -> list[DocumentLink]:
        return document_links(document, self.resolve(document))

    async def complete(
        self,
        document: Document,
        position: Position,
        cancel: asyncio.Event | None = None,
    ) -> list[CompletionCandidate] | None:
        line_prefix = document.line_text(position.line)[: position.character]
        return await complete_path(
            line_prefix,
            position,
            document.dirname,
            self.roots,
            self.listings,
            self.root_override,
            cancel,
        )

    def files_changed(self, paths: Iterable[str]) -> None:
        """Invalidate cached roots and listings touched by filesystem changes."""
        changed = [os.path.abspath(p) for p in paths]
        self.roots.invalidate(changed)
        dropped = self.listings.invalidate(changed)
        if dropped:
            logger.debug("Dropped %d cached directory listing(s)", dropped)

    def close(self) -> None:
        """Drop every cache, as on deactivation."""
        self.roots.clear()
        self.listings.clear()
        self.diagnostics.clear()
