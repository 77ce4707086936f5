"""Path completion inside an open ``{* ...`` reference."""

from __future__ import annotations

import asyncio
import logging
import os
import re
import threading
from collections.abc import Iterable

from mdx_include.core.ports.filesystem import FileSystem
from mdx_include.core.resolver import select_base_dir
from mdx_include.core.roots import RootResolver
from mdx_include.core.scanner import PATH_CHARS
from mdx_include.models import CompletionCandidate, DirectoryEntry, Position, TextRange

logger = logging.getLogger(__name__)

_OPENER = re.compile(r"\{[*!][>+-]?\s+", re.ASCII)
_PARTIAL_PATH = re.compile(PATH_CHARS + r"*", re.ASCII)
_PARAM_OPEN = re.compile(PATH_CHARS + r"+\s+(?:ln|hl)?\[", re.ASCII)


class DirectoryListingCache:
    """Memoized directory listings.

    A listing that fails to load is logged and returned empty, and is not
    cached so a later request can retry.
    """

    def __init__(self, fs: FileSystem) -> None:
        self._fs = fs
        self._cache: dict[str, list[DirectoryEntry]] = {}
        self._lock = threading.Lock()

    async def get(self, directory: str) -> list[DirectoryEntry]:
        directory = os.path.normpath(directory)
        with self._lock:
            cached = self._cache.get(directory)
        if cached is not None:
            return cached

        try:
            entries = await self._fs.list_directory(directory)
        except OSError as exc:
            logger.warning("Error reading directory %s: %s", directory, exc)
            return []

        with self._lock:
            self._cache[directory] = entries
        return entries

    def is_cached(self, directory: str) -> bool:
        with self._lock:
            return os.path.normpath(directory) in self._cache

    def invalidate(self, changed_paths: Iterable[str]) -> int:
        """Drop listings of every changed path and of its parent directory.

        Returns the number of listings dropped.
        """
        stale: set[str] = set()
        for path in changed_paths:
            path = os.path.normpath(path)
            stale.add(path)
            stale.add(os.path.dirname(path))
        with self._lock:
            dropped = [d for d in stale if d in self._cache]
            for directory in dropped:
                del self._cache[directory]
        return len(dropped)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


def open_reference_path(line_prefix: str) -> str | None:
    """Partial path typed after the last opener, or ``None`` if the cursor is
    not inside the path segment of an unterminated reference."""
    if "{*" not in line_prefix and "{!" not in line_prefix:
        return None

    last_opener = None
    for last_opener in _OPENER.finditer(line_prefix):
        pass
    if last_opener is None:
        return None

    tail = line_prefix[last_opener.end() :]
    if _PARAM_OPEN.match(tail):
        return None
    if not _PARTIAL_PATH.fullmatch(tail):
        return None
    return tail


def _candidate(entry: DirectoryEntry, prefix: str, replace: TextRange) -> CompletionCandidate:
    if entry.is_directory:
        return CompletionCandidate(
            label=entry.name,
            insert_text=entry.name + "/",
            kind="directory",
            replace=replace,
            documentation=f"Directory: {prefix}{entry.name}",
            retrigger=True,
        )
    return CompletionCandidate(
        label=entry.name,
        insert_text=entry.name,
        kind="file",
        replace=replace,
        documentation=f"File: {prefix}{entry.name}",
    )


async def complete_path(
    line_prefix: str,
    position: Position,
    document_dir: str,
    roots: RootResolver,
    listings: DirectoryListingCache,
    root_override: str | None = None,
    cancel: asyncio.Event | None = None,
) -> list[CompletionCandidate] | None:
    """File and directory suggestions for the path under the cursor.

    ``line_prefix`` is the current line up to the cursor. Returns ``None``
    when no suggestions apply (cursor outside an open reference path, inside
    an ``ln[``/``hl[`` block, or the request was cancelled).
    """
    current_path = open_reference_path(line_prefix)
    if current_path is None:
        return None

    slash = current_path.rfind("/")
    prefix = current_path[: slash + 1]
    partial_name = current_path[slash + 1 :]

    base_dir = select_base_dir(document_dir, roots, root_override)
    search_dir = os.path.normpath(os.path.join(base_dir, prefix)) if prefix else base_dir

    if cancel is not None and cancel.is_set():
        return None
    entries = await listings.get(search_dir)
    if cancel is not None and cancel.is_set():
        return None

    needle = partial_name.lower()
    matches = [e for e in entries if e.name.lower().startswith(needle)]
    matches.sort(key=lambda e: e.name.lower())

    # The cursor may sit past the end of the line.
    replace = TextRange(
        start=Position(line=position.line, character=len(line_prefix) - len(partial_name)),
        end=Position(line=position.line, character=len(line_prefix)),
    )
    return [_candidate(entry, prefix, replace) for entry in matches]
