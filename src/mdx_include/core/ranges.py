import re
from collections.abc import Sequence

from mdx_include.models import LineRange, Range, UnparseableRange

_SINGLE = re.compile(r"\d+")
_PAIR = re.compile(r"(\d+):(\d+)")


def parse_ranges(text: str) -> list[Range]:
    """Parse a range list such as ``"3:6,8,10:11"``.

    Segments keep their source order. A bare ``N`` becomes ``LineRange(N, N)``.
    Segments that are not ``N`` or ``A:B`` come back as ``UnparseableRange``
    instead of raising, so one broken clause never stops a lint pass.
    """
    ranges: list[Range] = []
    for segment in text.split(","):
        if _SINGLE.fullmatch(segment):
            line = int(segment)
            ranges.append(LineRange(start=line, end=line))
            continue
        pair = _PAIR.fullmatch(segment)
        if pair:
            ranges.append(LineRange(start=int(pair.group(1)), end=int(pair.group(2))))
        else:
            ranges.append(UnparseableRange(raw=segment))
    return ranges


def format_range(value: Range) -> str:
    if isinstance(value, UnparseableRange):
        return value.raw
    if value.start == value.end:
        return str(value.start)
    return f"{value.start}:{value.end}"


def format_ranges(ranges: Sequence[Range]) -> str:
    """Render ranges for humans: ``"3:6, 8, 10:11"``."""
    return ", ".join(format_range(r) for r in ranges)
