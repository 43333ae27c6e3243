"""
Type definitions and dataclasses for pdfextractx.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .constants import DRAW_OPERATION_PATTERN, NO_UNICODE
from .position_map import PositionMap


@dataclass(frozen=True, slots=True)
class GlyphRecord:
    """
    One parsed line of an extraction dump.

    Attributes:
        page: 1-based page number the glyph belongs to
        line_number: 1-based position of the line within the dump
        value: The glyph character, a ``[...]`` draw operation or ``NO_UNICODE``
        display_positions: Raw glyph box coordinates, passed through untouched
    """
    page: int
    line_number: int
    value: str
    display_positions: str = ""

    @property
    def is_draw_operation(self) -> bool:
        return DRAW_OPERATION_PATTERN.fullmatch(self.value) is not None

    @property
    def is_unmapped(self) -> bool:
        """Whether the glyph had no Unicode representation in the PDF."""
        return self.value == NO_UNICODE

    @property
    def is_content(self) -> bool:
        return not (self.is_draw_operation or self.is_unmapped)


@dataclass(frozen=True, slots=True)
class LigatureMatch:
    """A ligature key found in the content string."""

    start: int
    keyword: str

    @property
    def end(self) -> int:
        return self.start + len(self.keyword)


@dataclass(slots=True)
class ParsedExtraction:
    """
    Result of parsing an extraction dump.

    Attributes:
        records: Glyph records keyed by line number, in dump order
        content: Concatenated values of all content-bearing records
        content_map: Content string index to line number
    """
    records: Mapping[int, GlyphRecord]
    content: str
    content_map: PositionMap


@dataclass(slots=True)
class ExpandedContent:
    """Ligature-expanded content plus its map back to the content string."""

    text: str
    index_map: PositionMap
    matches: tuple[LigatureMatch, ...] = field(default_factory=tuple)


@dataclass(slots=True)
class DocumentSummary:
    """
    Counts describing a built document.

    Attributes:
        total_records: Number of lines in the dump
        content_records: Records contributing a character to the content string
        draw_operations: Records holding a ``[...]`` draw operation
        unmapped_glyphs: Records holding the ``NO_UNICODE`` sentinel
        pages: Sorted page numbers present in the dump
        ligatures: Number of ligature occurrences rewritten
        content_length: Length of the content string
        expanded_length: Length of the ligature-expanded string
    """
    total_records: int
    content_records: int
    draw_operations: int
    unmapped_glyphs: int
    pages: list[int] = field(default_factory=list)
    ligatures: int = 0
    content_length: int = 0
    expanded_length: int = 0

    def __str__(self) -> str:
        return (
            "DocumentSummary(records={records}, content={content}, "
            "ligatures={ligatures})"
        ).format(
            records=self.total_records,
            content=self.content_records,
            ligatures=self.ligatures,
        )


__all__ = [
    "GlyphRecord",
    "LigatureMatch",
    "ParsedExtraction",
    "ExpandedContent",
    "DocumentSummary",
]
