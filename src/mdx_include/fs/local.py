import asyncio
import os

from mdx_include.models import DirectoryEntry


def _scan(path: str) -> list[DirectoryEntry]:
    with os.scandir(path) as it:
        return [DirectoryEntry(name=entry.name, is_directory=entry.is_dir()) for entry in it]


class LocalFileSystem:
    """Real-disk implementation of the ``FileSystem`` port."""

    def path_exists(self, path: str) -> bool:
        return os.path.exists(path)

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        return await asyncio.to_thread(_scan, path)
