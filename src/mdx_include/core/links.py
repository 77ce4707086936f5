from collections.abc import Sequence

from mdx_include.core.ranges import format_ranges
from mdx_include.models import Document, DocumentLink, FileReference, ResolvedReference


def link_tooltip(reference: FileReference) -> str:
    tooltip = f"Open {reference.file_path}"
    if reference.line_ranges is not None:
        tooltip += f" at lines {format_ranges(reference.line_ranges)}"
    return tooltip


def document_links(document: Document, references: Sequence[ResolvedReference]) -> list[DocumentLink]:
    """Navigation targets for references whose file exists."""
    return [
        DocumentLink(
            range=document.range_of(ref.span),
            span=ref.span,
            target=ref.absolute_path,
            tooltip=link_tooltip(ref),
        )
        for ref in references
        if ref.exists
    ]
