"""Tests for reference scanning."""

from __future__ import annotations

import pytest

from mdx_include.core.scanner import scan_references
from mdx_include.models import LineRange, Span, UnparseableRange


def test_highlight_only_reference() -> None:
    refs = scan_references("Some text\n{* a/b.py hl[5] *}\nmore")
    assert len(refs) == 1
    ref = refs[0]
    assert ref.file_path == "a/b.py"
    assert ref.highlight_ranges == [LineRange(start=5, end=5)]
    assert ref.line_ranges is None


@pytest.mark.parametrize(
    "text",
    ["{* a/b.py ln[3:6,8] hl[3,5:6] *}", "{* a/b.py hl[3,5:6] ln[3:6,8] *}"],
    ids=["ln-first", "hl-first"],
)
def test_both_blocks_attributed_to_their_keyword(text: str) -> None:
    (ref,) = scan_references(text)
    assert ref.line_ranges == [LineRange(start=3, end=6), LineRange(start=8, end=8)]
    assert ref.highlight_ranges == [LineRange(start=3, end=3), LineRange(start=5, end=6)]


def test_reference_without_blocks_has_no_ranges() -> None:
    (ref,) = scan_references("{* docs_src/app.py *}")
    assert ref.file_path == "docs_src/app.py"
    assert ref.line_ranges is None
    assert ref.highlight_ranges is None


def test_span_covers_whole_match() -> None:
    text = "intro {* a.py ln[1] *} tail"
    (ref,) = scan_references(text)
    assert ref.span == Span(start=6, end=22)
    assert text[ref.span.start : ref.span.end] == "{* a.py ln[1] *}"


@pytest.mark.parametrize(
    "text",
    ["{! a.py !}", "{*> a.py *}", "{*+ a.py *}", "{*- a.py *}", "{!> a.py !}"],
)
def test_opener_families_and_modifiers(text: str) -> None:
    (ref,) = scan_references(text)
    assert ref.file_path == "a.py"


@pytest.mark.parametrize("text", ["{* a.py !}", "{! a.py *}"])
def test_closer_must_match_opener_family(text: str) -> None:
    assert scan_references(text) == []


def test_whitespace_after_opener_is_required() -> None:
    assert scan_references("{*a.py *}") == []


def test_path_with_space_is_not_a_reference() -> None:
    assert scan_references("{* a b.py *}") == []


def test_non_ascii_path_is_not_a_reference() -> None:
    assert scan_references("{* café.py *}") == []


def test_unlabeled_block_counts_toward_span_only() -> None:
    text = "{* a.py [1:2] *}"
    (ref,) = scan_references(text)
    assert ref.line_ranges is None
    assert ref.highlight_ranges is None
    assert ref.span == Span(start=0, end=len(text))


def test_unlabeled_block_next_to_labeled_one() -> None:
    (ref,) = scan_references("{* a.py [9] ln[2] *}")
    assert ref.line_ranges == [LineRange(start=2, end=2)]
    assert ref.highlight_ranges is None


def test_repeated_keyword_last_block_wins() -> None:
    (ref,) = scan_references("{* a.py ln[1] ln[2:3] *}")
    assert ref.line_ranges == [LineRange(start=2, end=3)]


def test_malformed_range_is_carried_not_raised() -> None:
    (ref,) = scan_references("{* a.py ln[3-5,7] *}")
    assert ref.line_ranges == [UnparseableRange(raw="3-5"), LineRange(start=7, end=7)]


def test_all_references_in_order() -> None:
    text = "{* one.py *}\ntext {! two.md !} and {* three/x.py ln[1] *}\n"
    refs = scan_references(text)
    assert [r.file_path for r in refs] == ["one.py", "two.md", "three/x.py"]
    assert [r.span.start for r in refs] == sorted(r.span.start for r in refs)


def test_scan_is_idempotent() -> None:
    text = "{* a.py ln[1:2] *} {! b.py hl[3] !}"
    assert scan_references(text) == scan_references(text)


def test_plain_markdown_has_no_references() -> None:
    assert scan_references("# Title\n\n[link](a.py) `{* not closed`\n") == []
