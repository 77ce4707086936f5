from mdx_include.fs.local import LocalFileSystem
from mdx_include.fs.memory import InMemoryFileSystem

__all__ = [
    "InMemoryFileSystem",
    "LocalFileSystem",
]
