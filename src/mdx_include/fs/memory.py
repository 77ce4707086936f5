import posixpath
from collections import Counter

from mdx_include.models import DirectoryEntry


class InMemoryFileSystem:
    """A POSIX-style file tree held in memory, counting every probe.

    ``exists_calls`` and ``list_calls`` count lookups per path so tests can
    observe how often a cache went to the "disk".
    """

    def __init__(self, files: list[str] | None = None, directories: list[str] | None = None) -> None:
        self.files: set[str] = set()
        self.directories: set[str] = {"/"}
        self.unreadable: set[str] = set()
        self.exists_calls: Counter[str] = Counter()
        self.list_calls: Counter[str] = Counter()
        for directory in directories or []:
            self.add_directory(directory)
        for file in files or []:
            self.add_file(file)

    def add_directory(self, path: str) -> None:
        path = posixpath.normpath(path)
        while path not in self.directories:
            self.directories.add(path)
            path = posixpath.dirname(path)

    def add_file(self, path: str) -> None:
        path = posixpath.normpath(path)
        self.add_directory(posixpath.dirname(path))
        self.files.add(path)

    def remove(self, path: str) -> None:
        path = posixpath.normpath(path)
        self.files.discard(path)
        self.directories = {d for d in self.directories if d != path and not d.startswith(path + "/")}
        self.files = {f for f in self.files if not f.startswith(path + "/")}

    @property
    def probe_count(self) -> int:
        return sum(self.exists_calls.values())

    def path_exists(self, path: str) -> bool:
        path = posixpath.normpath(path)
        self.exists_calls[path] += 1
        return path in self.files or path in self.directories

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        path = posixpath.normpath(path)
        self.list_calls[path] += 1
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        if path not in self.directories:
            raise FileNotFoundError(2, "No such file or directory", path)

        entries = [
            DirectoryEntry(name=posixpath.basename(d), is_directory=True)
            for d in self.directories
            if d != path and posixpath.dirname(d) == path
        ]
        entries.extend(
            DirectoryEntry(name=posixpath.basename(f), is_directory=False)
            for f in self.files
            if posixpath.dirname(f) == path
        )
        return sorted(entries, key=lambda e: e.name)
