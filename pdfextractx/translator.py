"""Lookups between expanded-content offsets and extraction lines."""

from __future__ import annotations

from typing import Mapping

from .exceptions import PositionNotFoundError
from .position_map import PositionMap
from .types import GlyphRecord

__all__ = ["PositionTranslator"]


class PositionTranslator:
    """Composes the content and expanded index maps.

    ``line_at`` walks expanded index -> content index -> line number and
    ``expanded_index_of`` walks the same chain backwards through the
    reverse maps.
    """

    def __init__(
        self,
        records: Mapping[int, GlyphRecord],
        content_map: PositionMap,
        expanded_map: PositionMap,
    ) -> None:
        self._records = records
        self._content_map = content_map
        self._expanded_map = expanded_map

    def record(self, line_number: int) -> GlyphRecord:
        try:
            return self._records[line_number]
        except KeyError:
            raise PositionNotFoundError(
                f"Line {line_number} does not exist in the extraction dump."
            ) from None

    def content_index_of(self, line_number: int) -> int:
        record = self.record(line_number)
        content_index = self._content_map.key_of(line_number)
        if content_index is None:
            kind = "a draw operation" if record.is_draw_operation else "an unmapped glyph"
            raise PositionNotFoundError(
                f"Line {line_number} is {kind} and has no content position."
            )
        return content_index

    def line_at(self, expanded_index: int) -> GlyphRecord:
        content_index = self._expanded_map.get(expanded_index)
        if content_index is None:
            raise PositionNotFoundError(
                f"Expanded index {expanded_index} has no content position."
            )
        line_number = self._content_map.get(content_index)
        if line_number is None:
            raise PositionNotFoundError(
                f"Content index {content_index} (expanded index {expanded_index}) "
                "has no extraction line."
            )
        return self.record(line_number)

    def lines_in_range(self, start: int, end: int) -> list[GlyphRecord]:
        """Return the records behind expanded indices ``start`` to ``end`` inclusive.

        The first unresolved index aborts the whole lookup.
        """

        return [self.line_at(index) for index in range(start, end + 1)]

    def expanded_index_of(self, line_number: int) -> int:
        content_index = self.content_index_of(line_number)
        expanded_index = self._expanded_map.key_of(content_index)
        if expanded_index is None:
            raise PositionNotFoundError(
                f"Line {line_number} (content index {content_index}) has no expanded position."
            )
        return expanded_index
