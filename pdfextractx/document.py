"""Read-only document aggregate built from one page's extraction dump."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from .config import ExtractOptions, validate_ligature_table
from .constants import DEFAULT_LIGATURES
from .expander import LigatureExpander
from .matcher import LigatureMatcher
from .parser import ExtractionParser
from .position_map import ConflictPolicy, PositionMap
from .translator import PositionTranslator
from .types import DocumentSummary, GlyphRecord, LigatureMatch
from .utils import read_extraction

LOGGER = logging.getLogger(__name__)

__all__ = ["PdfExtractDocument"]


class PdfExtractDocument:
    """Extraction dump with its content and ligature-expanded strings.

    Use :meth:`from_text` or :meth:`from_file` to build one.  Once built the
    document never changes, so it can be shared between threads freely.
    """

    __slots__ = (
        "_raw_text",
        "_content",
        "_expanded_content",
        "_records",
        "_content_map",
        "_expanded_map",
        "_ligature_matches",
        "_translator",
    )

    def __init__(
        self,
        raw_text: str,
        content: str,
        expanded_content: str,
        records: Mapping[int, GlyphRecord],
        content_map: PositionMap,
        expanded_map: PositionMap,
        ligature_matches: tuple[LigatureMatch, ...] = (),
    ) -> None:
        self._raw_text = raw_text
        self._content = content
        self._expanded_content = expanded_content
        self._records = records
        self._content_map = content_map.freeze()
        self._expanded_map = expanded_map.freeze()
        self._ligature_matches = tuple(ligature_matches)
        self._translator = PositionTranslator(records, self._content_map, self._expanded_map)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_text(
        cls,
        raw_text: str,
        ligatures: Mapping[str, str] | None = None,
        *,
        conflict_policy: ConflictPolicy | str = ConflictPolicy.FIRST,
        matcher: LigatureMatcher | None = None,
    ) -> "PdfExtractDocument":
        table = validate_ligature_table(DEFAULT_LIGATURES if ligatures is None else ligatures)
        parsed = ExtractionParser().parse(raw_text)
        expanded = LigatureExpander(table, matcher, policy=conflict_policy).expand(parsed.content)
        LOGGER.debug(
            "Built document: %d records, %d content chars, %d expanded chars",
            len(parsed.records),
            len(parsed.content),
            len(expanded.text),
        )
        return cls(
            raw_text=raw_text,
            content=parsed.content,
            expanded_content=expanded.text,
            records=parsed.records,
            content_map=parsed.content_map,
            expanded_map=expanded.index_map,
            ligature_matches=expanded.matches,
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        ligatures: Mapping[str, str] | None = None,
        *,
        options: ExtractOptions | None = None,
    ) -> "PdfExtractDocument":
        options = options or ExtractOptions()
        raw_text = read_extraction(path, encoding=options.encoding)
        return cls.from_text(
            raw_text,
            options.ligatures if ligatures is None else ligatures,
            conflict_policy=options.conflict_policy,
        )

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------
    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def content(self) -> str:
        return self._content

    @property
    def expanded_content(self) -> str:
        return self._expanded_content

    @property
    def records(self) -> Mapping[int, GlyphRecord]:
        return self._records

    @property
    def content_map(self) -> PositionMap:
        return self._content_map

    @property
    def expanded_map(self) -> PositionMap:
        return self._expanded_map

    @property
    def ligature_matches(self) -> tuple[LigatureMatch, ...]:
        return self._ligature_matches

    @property
    def translator(self) -> PositionTranslator:
        return self._translator

    def record(self, line_number: int) -> GlyphRecord:
        return self._translator.record(line_number)

    def line_at(self, expanded_index: int) -> GlyphRecord:
        return self._translator.line_at(expanded_index)

    def lines_in_range(self, start: int, end: int) -> list[GlyphRecord]:
        return self._translator.lines_in_range(start, end)

    def expanded_index_of(self, line_number: int) -> int:
        return self._translator.expanded_index_of(line_number)

    def summary(self) -> DocumentSummary:
        records = self._records.values()
        return DocumentSummary(
            total_records=len(self._records),
            content_records=len(self._content_map),
            draw_operations=sum(1 for record in records if record.is_draw_operation),
            unmapped_glyphs=sum(1 for record in records if record.is_unmapped),
            pages=sorted({record.page for record in records}),
            ligatures=len(self._ligature_matches),
            content_length=len(self._content),
            expanded_length=len(self._expanded_content),
        )

    def __repr__(self) -> str:
        return (
            f"PdfExtractDocument(records={len(self._records)}, "
            f"content={len(self._content)}, expanded={len(self._expanded_content)})"
        )
