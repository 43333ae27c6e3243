"""Multi-pattern search for ligature keys.

:class:`LigatureMatcher` is an Aho-Corasick automaton built once from the
keys of a ligature table.  A scan visits every character of the haystack
once, so the cost is linear in the haystack length plus the number of
matches, independent of how many keys the table holds.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from .exceptions import InvalidLigatureTableError
from .types import LigatureMatch

__all__ = ["LigatureMatcher"]

_ROOT = 0


class LigatureMatcher:
    """Aho-Corasick automaton over a fixed set of ligature keys."""

    def __init__(self, keywords: Iterable[str]) -> None:
        self._goto: list[dict[str, int]] = [{}]
        self._fail: list[int] = [_ROOT]
        self._output: list[str | None] = [None]
        # Nearest node on the failure chain that ends a keyword.
        self._dict_link: list[int] = [_ROOT]

        unique: set[str] = set()
        for keyword in keywords:
            if not isinstance(keyword, str) or not keyword:
                raise InvalidLigatureTableError(
                    f"Ligature keys must be non-empty strings, got {keyword!r}."
                )
            unique.add(keyword)
        self.keywords = frozenset(unique)

        for keyword in sorted(self.keywords):
            self._insert(keyword)
        self._link()

    @classmethod
    def build(cls, keywords: Iterable[str]) -> "LigatureMatcher":
        return cls(keywords)

    def __len__(self) -> int:
        return len(self.keywords)

    def __repr__(self) -> str:
        return f"LigatureMatcher(keywords={len(self.keywords)}, states={len(self._goto)})"

    def _insert(self, keyword: str) -> None:
        node = _ROOT
        for char in keyword:
            child = self._goto[node].get(char)
            if child is None:
                child = len(self._goto)
                self._goto.append({})
                self._fail.append(_ROOT)
                self._output.append(None)
                self._dict_link.append(_ROOT)
                self._goto[node][char] = child
            node = child
        self._output[node] = keyword

    def _link(self) -> None:
        queue: deque[int] = deque(self._goto[_ROOT].values())
        while queue:
            node = queue.popleft()
            for char, child in self._goto[node].items():
                fallback = self._fail[node]
                while fallback != _ROOT and char not in self._goto[fallback]:
                    fallback = self._fail[fallback]
                target = self._goto[fallback].get(char, _ROOT)
                if target == child:
                    target = _ROOT
                self._fail[child] = target
                self._dict_link[child] = (
                    target if self._output[target] is not None else self._dict_link[target]
                )
                queue.append(child)

    def find_all(self, haystack: str) -> list[LigatureMatch]:
        """Return matches in ``haystack`` ordered by start offset.

        Start offsets are unique: when several keys begin at the same offset
        only the first one the automaton reports (the one ending earliest)
        is kept.
        """

        found: dict[int, LigatureMatch] = {}
        state = _ROOT
        for index, char in enumerate(haystack):
            while state != _ROOT and char not in self._goto[state]:
                state = self._fail[state]
            state = self._goto[state].get(char, _ROOT)

            node = state if self._output[state] is not None else self._dict_link[state]
            while node != _ROOT:
                keyword = self._output[node]
                start = index - len(keyword) + 1
                if start not in found:
                    found[start] = LigatureMatch(start=start, keyword=keyword)
                node = self._dict_link[node]

        return [found[start] for start in sorted(found)]
