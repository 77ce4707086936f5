from __future__ import annotations

import os
import re
from typing import Annotated, Literal

from pydantic import BaseModel, Field

PACKAGE_NAME = "mdx-include"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LineRange(BaseModel):
    kind: Literal["lines"] = "lines"
    start: int
    end: int


class UnparseableRange(BaseModel):
    """A range segment that is neither ``N`` nor ``A:B``."""

    kind: Literal["unparseable"] = "unparseable"
    raw: str


Range = Annotated[LineRange | UnparseableRange, Field(discriminator="kind")]


class Span(BaseModel):
    start: int
    end: int


class Position(BaseModel):
    line: int
    character: int


class TextRange(BaseModel):
    start: Position
    end: Position


class FileReference(BaseModel):
    file_path: str
    line_ranges: list[Range] | None = None
    highlight_ranges: list[Range] | None = None
    span: Span


class ResolvedReference(FileReference):
    absolute_path: str
    exists: bool


class Diagnostic(BaseModel):
    range: TextRange
    message: str
    severity: Literal["error"] = "error"
    source: str = PACKAGE_NAME


class DocumentLink(BaseModel):
    range: TextRange
    span: Span
    target: str
    tooltip: str


class DirectoryEntry(BaseModel):
    name: str
    is_directory: bool


class CompletionCandidate(BaseModel):
    label: str
    insert_text: str
    kind: Literal["file", "directory"]
    replace: TextRange
    documentation: str
    retrigger: bool = False


class Document(BaseModel):
    """A Markdown document: its absolute path and full text."""

    path: str
    text: str

    @property
    def dirname(self) -> str:
        return os.path.dirname(self.path)

    def position_at(self, offset: int) -> Position:
        """Map a character offset to a zero-based line/character position.

        ``\\n``, ``\\r\\n`` and ``\\r`` all end a line. Offsets outside the text
        are clamped.
        """
        offset = max(0, min(offset, len(self.text)))
        line = 0
        line_start = 0
        for match in _LINE_BREAK.finditer(self.text, 0, offset):
            line += 1
            line_start = match.end()
        return Position(line=line, character=offset - line_start)

    def range_of(self, span: Span) -> TextRange:
        return TextRange(start=self.position_at(span.start), end=self.position_at(span.end))

    def line_text(self, line: int) -> str:
        lines = _LINE_BREAK.split(self.text)
        return lines[line] if 0 <= line < len(lines) else ""
