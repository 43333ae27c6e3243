"""Parsing of line-oriented glyph extraction dumps.

Each line of a dump describes one glyph or draw operation::

    <page>\\t<value>\\t<display positions>

The parser keeps every line as a :class:`~pdfextractx.types.GlyphRecord`
and concatenates the values of content-bearing records into the content
string, remembering which line produced each character.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from .constants import COLUMN_SEPARATOR, PAGE_PATTERN
from .exceptions import MalformedRecordError
from .position_map import ConflictPolicy, PositionMap
from .types import GlyphRecord, ParsedExtraction

LOGGER = logging.getLogger(__name__)

__all__ = ["ExtractionParser", "parse_extraction", "split_records"]


# Control characters and the ASCII space, U+0000 to U+0020.
_TRIM_CHARS = "".join(map(chr, range(0x21)))


def _trim(text: str) -> str:
    """Strip ASCII control characters and spaces, keeping Unicode spaces such as NBSP."""
    return text.strip(_TRIM_CHARS)


def split_records(raw_text: str) -> list[str]:
    """Split a dump into record lines, ignoring trailing empty lines."""

    lines = raw_text.split("\n")
    while lines and lines[-1] in ("", "\r"):
        lines.pop()
    return lines


class ExtractionParser:
    """Turns raw extraction text into glyph records and the content string."""

    def parse_line(self, line: str, line_number: int) -> GlyphRecord:
        columns = line.split(COLUMN_SEPARATOR)
        if len(columns) < 2:
            raise MalformedRecordError(
                f"Expected at least 2 tab-separated columns, found {len(columns)}.",
                line_number=line_number,
                line=line,
            )

        page_token = _trim(columns[0])
        if not PAGE_PATTERN.fullmatch(page_token):
            raise MalformedRecordError(
                f"Invalid page number: '{page_token}'. Expected a positive integer.",
                line_number=line_number,
                line=line,
            )
        page = int(page_token)
        if page < 1:
            raise MalformedRecordError(
                f"Invalid page number: {page}. Page numbers must be >= 1.",
                line_number=line_number,
                line=line,
            )

        display_positions = _trim(columns[2]) if len(columns) > 2 else ""
        return GlyphRecord(
            page=page,
            line_number=line_number,
            value=_trim(columns[1]),
            display_positions=display_positions,
        )

    def parse(self, raw_text: str) -> ParsedExtraction:
        records: dict[int, GlyphRecord] = {}
        content_map = PositionMap("content", policy=ConflictPolicy.STRICT)
        chars: list[str] = []

        for line_number, line in enumerate(split_records(raw_text), start=1):
            record = self.parse_line(line, line_number)
            records[line_number] = record

            if not record.is_content:
                continue
            # Every content index must advance by exactly one character.
            if len(record.value) != 1:
                raise MalformedRecordError(
                    f"Content glyph must be exactly one character, got {record.value!r}.",
                    line_number=line_number,
                    line=line,
                )
            content_map.put(len(chars), line_number)
            chars.append(record.value)

        LOGGER.debug(
            "Parsed %d extraction records, %d content characters", len(records), len(chars)
        )
        return ParsedExtraction(
            records=MappingProxyType(records),
            content="".join(chars),
            content_map=content_map.freeze(),
        )


def parse_extraction(raw_text: str) -> ParsedExtraction:
    return ExtractionParser().parse(raw_text)
