from typing import Protocol

from mdx_include.models import DirectoryEntry


class FileSystem(Protocol):
    def path_exists(self, path: str) -> bool: ...

    async def list_directory(self, path: str) -> list[DirectoryEntry]: ...
