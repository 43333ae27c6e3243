"""Ligature rewriting with position tracking.

The expander walks the content string once.  Characters outside a
ligature are copied and mapped one to one.  A ligature key is replaced by
its expansion and the two sides are paired by co-advancing cursors: both
start on the first character, advance together while each side has room,
and the shorter side then holds on its last character while the longer
side finishes.  With ``{"ﬃ": "ffi"}`` the three output characters all map
back to the single ``ﬃ``; with ``{"ffi": "fi"}`` the output ``i`` is paired
with both the second ``f`` and the ``i`` of the source.

Those many-to-one pairings are where the two directions of the index map
collide; the :class:`~pdfextractx.position_map.ConflictPolicy` decides
which pairs each direction keeps.
"""

from __future__ import annotations

import logging
from typing import Iterator, Mapping

from .config import validate_ligature_table
from .exceptions import InvalidLigatureTableError, LigatureConflictError, PositionConflictError
from .matcher import LigatureMatcher
from .position_map import ConflictPolicy, PositionMap
from .types import ExpandedContent, LigatureMatch

LOGGER = logging.getLogger(__name__)

__all__ = ["LigatureExpander", "expand_ligatures", "pair_positions"]


def pair_positions(key_length: int, replacement_length: int) -> Iterator[tuple[int, int]]:
    """Yield ``(replacement_offset, key_offset)`` pairs for one ligature."""

    if key_length < 1 or replacement_length < 1:
        raise ValueError("Ligature key and replacement must both be non-empty")

    key_last = key_length - 1
    replacement_last = replacement_length - 1
    key_offset = replacement_offset = 0
    while True:
        yield replacement_offset, key_offset
        if key_offset == key_last and replacement_offset == replacement_last:
            return
        if key_offset < key_last:
            key_offset += 1
        if replacement_offset < replacement_last:
            replacement_offset += 1


class LigatureExpander:
    """Rewrites ligatures in a content string and maps positions back."""

    def __init__(
        self,
        ligatures: Mapping[str, str],
        matcher: LigatureMatcher | None = None,
        *,
        policy: ConflictPolicy | str = ConflictPolicy.FIRST,
    ) -> None:
        self.ligatures = validate_ligature_table(ligatures)
        self.matcher = matcher or LigatureMatcher.build(self.ligatures)
        missing = self.matcher.keywords - self.ligatures.keys()
        if missing:
            raise InvalidLigatureTableError(
                f"Matcher keys without a replacement: {', '.join(sorted(missing))}."
            )
        self.policy = ConflictPolicy(policy)

    def expand(self, content: str) -> ExpandedContent:
        occurrences = {match.start: match for match in self.matcher.find_all(content)}
        index_map = PositionMap("expanded", policy=self.policy)
        pieces: list[str] = []
        applied: list[LigatureMatch] = []

        source_index = 0
        output_index = 0
        while source_index < len(content):
            match = occurrences.get(source_index)
            if match is None:
                pieces.append(content[source_index])
                index_map.put(output_index, source_index)
                source_index += 1
                output_index += 1
                continue

            replacement = self.ligatures[match.keyword]
            pieces.append(replacement)
            try:
                for replacement_offset, key_offset in pair_positions(
                    len(match.keyword), len(replacement)
                ):
                    index_map.put(output_index + replacement_offset, source_index + key_offset)
            except PositionConflictError as exc:
                raise LigatureConflictError(
                    f"Ligature {match.keyword!r} at content index {source_index} "
                    f"cannot be mapped to {replacement!r}: {exc.message}"
                ) from exc

            applied.append(match)
            source_index += len(match.keyword)
            output_index += len(replacement)

        LOGGER.debug("Expanded %d ligature occurrences", len(applied))
        return ExpandedContent(
            text="".join(pieces),
            index_map=index_map.freeze(),
            matches=tuple(applied),
        )


def expand_ligatures(
    content: str,
    ligatures: Mapping[str, str],
    matcher: LigatureMatcher | None = None,
    *,
    policy: ConflictPolicy | str = ConflictPolicy.FIRST,
) -> ExpandedContent:
    return LigatureExpander(ligatures, matcher, policy=policy).expand(content)
