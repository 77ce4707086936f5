"""Find ``{* path ln[..] hl[..] *}`` references in Markdown text."""

from __future__ import annotations

import re

from mdx_include.core.ranges import parse_ranges
from mdx_include.models import FileReference, Span

PATH_CHARS = r"[\w/.\-]"

# The closing marker has to belong to the opener's family: {* ... *} or {! ... !}.
_BODY = PATH_CHARS + r"+)(?:\s+(?:ln|hl)?\[[\w,:-]+\])*\s*"
REFERENCE_PATTERN = re.compile(
    r"\{\*[>+-]?\s+(?P<star>" + _BODY + r"\*\}"
    r"|\{![>+-]?\s+(?P<bang>" + _BODY + r"!\}",
    re.ASCII,
)
PARAM_PATTERN = re.compile(r"\s+(ln|hl)\[([\w,:-]+)\]", re.ASCII)


def scan_references(text: str) -> list[FileReference]:
    """Return every reference in ``text``, left to right.

    A reference without ``ln``/``hl`` blocks has both range fields set to
    ``None``. When a keyword repeats, its last block wins. Unlabeled ``[..]``
    blocks belong to the match but set no field.
    """
    references: list[FileReference] = []
    for match in REFERENCE_PATTERN.finditer(text):
        full_match = match.group(0)
        reference = FileReference(
            file_path=match.group("star") or match.group("bang"),
            span=Span(start=match.start(), end=match.end()),
        )

        if " ln[" in full_match or " hl[" in full_match:
            for param in PARAM_PATTERN.finditer(full_match):
                param_type, range_text = param.groups()
                ranges = parse_ranges(range_text)
                if param_type == "ln":
                    reference.line_ranges = ranges
                else:
                    reference.highlight_ranges = ranges

        references.append(reference)
    return references
