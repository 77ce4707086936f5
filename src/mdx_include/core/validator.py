"""Existence checks for resolved references, reported as diagnostics."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence

from mdx_include.models import Diagnostic, Document, ResolvedReference


def missing_file_message(file_path: str) -> str:
    return f"The referenced file does not exist: {file_path}"


def validate_references(document: Document, references: Sequence[ResolvedReference]) -> list[Diagnostic]:
    """One error diagnostic per reference whose target does not exist.

    The message names the path as written in the document, not the resolved
    absolute path.
    """
    return [
        Diagnostic(range=document.range_of(ref.span), message=missing_file_message(ref.file_path))
        for ref in references
        if not ref.exists
    ]


class DiagnosticStore:
    """Latest diagnostics per document.

    ``set`` replaces whatever was stored for the document, so each validation
    pass is a full snapshot rather than an addition.
    """

    def __init__(self) -> None:
        self._by_document: dict[str, list[Diagnostic]] = {}
        self._lock = threading.Lock()

    def set(self, document_path: str, diagnostics: Sequence[Diagnostic]) -> None:
        with self._lock:
            self._by_document[document_path] = list(diagnostics)

    def get(self, document_path: str) -> list[Diagnostic]:
        with self._lock:
            return list(self._by_document.get(document_path, []))

    def delete(self, document_path: str) -> None:
        with self._lock:
            self._by_document.pop(document_path, None)

    def clear(self) -> None:
        with self._lock:
            self._by_document.clear()

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._by_document))

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_document)
