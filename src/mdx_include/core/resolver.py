import os

from mdx_include.core.ports.filesystem import FileSystem
from mdx_include.core.roots import RootResolver
from mdx_include.core.scanner import scan_references
from mdx_include.models import Document, FileReference, ResolvedReference


def select_base_dir(document_dir: str, roots: RootResolver, root_override: str | None = None) -> str:
    """Directory every reference of a document resolves against.

    The configured override wins, then the discovered project root, then the
    document's own directory.
    """
    if root_override is not None:
        return root_override
    return roots.find_root(document_dir) or document_dir


def resolve_path(base_dir: str, file_path: str) -> str:
    return os.path.normpath(os.path.join(base_dir, file_path))


def resolve_reference(reference: FileReference, base_dir: str, fs: FileSystem) -> ResolvedReference:
    absolute_path = resolve_path(base_dir, reference.file_path)
    return ResolvedReference(
        **reference.model_dump(),
        absolute_path=absolute_path,
        exists=fs.path_exists(absolute_path),
    )


def resolve_references(
    document: Document,
    fs: FileSystem,
    roots: RootResolver,
    root_override: str | None = None,
) -> list[ResolvedReference]:
    references = scan_references(document.text)
    if not references:
        return []
    base_dir = select_base_dir(document.dirname, roots, root_override)
    return [resolve_reference(ref, base_dir, fs) for ref in references]
