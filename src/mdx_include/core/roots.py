"""Project root discovery: the nearest ancestor holding the root marker."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable

from mdx_include.core.ports.filesystem import FileSystem

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "mkdocs.yml"

_MISSING = object()


class RootResolver:
    """Walks ancestor directories looking for ``marker`` and memoizes the answer.

    The memo is process-wide for the resolver instance and is authoritative
    once populated: a hit never touches the filesystem. ``invalidate`` drops
    it when the marker file itself changes.
    """

    def __init__(self, fs: FileSystem, marker: str = DEFAULT_MARKER) -> None:
        self._fs = fs
        self.marker = marker
        self._cache: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def find_root(self, start_dir: str) -> str | None:
        start_dir = os.path.abspath(start_dir)
        visited: list[str] = []
        seen: set[str] = set()
        current = start_dir
        root: str | None = None

        while current not in seen:
            with self._lock:
                cached = self._cache.get(current, _MISSING)
            if cached is not _MISSING:
                # An ancestor (or the start itself) already knows its nearest root.
                root = cached  # type: ignore[assignment]
                break
            seen.add(current)
            visited.append(current)
            if self._fs.path_exists(os.path.join(current, self.marker)):
                root = current
                break
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent

        # Every directory on the walk shares the same nearest root, found or not.
        with self._lock:
            for directory in visited:
                self._cache[directory] = root
        logger.debug("Root for %s: %s (%d directories probed)", start_dir, root, len(visited))
        return root

    def cached(self, start_dir: str) -> str | None:
        """Return the memoized root, or ``None`` if unknown or not found."""
        with self._lock:
            return self._cache.get(os.path.abspath(start_dir))

    def is_cached(self, start_dir: str) -> bool:
        with self._lock:
            return os.path.abspath(start_dir) in self._cache

    def invalidate(self, changed_paths: Iterable[str]) -> bool:
        """Clear the memo if any changed path is a marker file.

        Returns ``True`` when the memo was cleared.
        """
        if any(os.path.basename(p) == self.marker for p in changed_paths):
            self.clear()
            logger.info("Root marker changed; root cache cleared")
            return True
        return False

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
