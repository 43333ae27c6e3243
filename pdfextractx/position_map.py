"""Bidirectional integer index maps with explicit collision handling.

A :class:`PositionMap` owns two plain dictionaries, a forward
``key -> value`` mapping and a reverse ``value -> key`` mapping.  Both are
filled from the same stream of :meth:`PositionMap.put` calls, and the
:class:`ConflictPolicy` decides what happens when a new pair collides with
one already stored on either side.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType

from .exceptions import PositionConflictError

LOGGER = logging.getLogger(__name__)

__all__ = ["ConflictPolicy", "PositionMap"]


class ConflictPolicy(str, Enum):
    """How a :class:`PositionMap` resolves colliding pairs."""

    #: Each direction keeps the first pair it was offered.
    FIRST = "first"
    #: A new pair evicts every stored pair it collides with (one-to-one).
    LAST = "last"
    #: Any collision raises :class:`PositionConflictError`.
    STRICT = "strict"


class PositionMap(Mapping[int, int]):
    """Forward index map with an independently maintained inverse."""

    def __init__(
        self,
        name: str = "positions",
        policy: ConflictPolicy | str = ConflictPolicy.FIRST,
    ) -> None:
        self.name = name
        self.policy = ConflictPolicy(policy)
        self._forward: dict[int, int] = {}
        self._reverse: dict[int, int] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Mapping protocol (forward direction)
    # ------------------------------------------------------------------
    def __getitem__(self, key: int) -> int:
        return self._forward[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return (
            f"PositionMap(name={self.name!r}, policy={self.policy.value!r}, "
            f"forward={len(self._forward)}, reverse={len(self._reverse)})"
        )

    # ------------------------------------------------------------------
    # Reverse direction
    # ------------------------------------------------------------------
    @property
    def inverse(self) -> Mapping[int, int]:
        return MappingProxyType(self._reverse)

    def key_of(self, value: int, default: int | None = None) -> int | None:
        return self._reverse.get(value, default)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "PositionMap":
        self._frozen = True
        return self

    def put(self, key: int, value: int) -> None:
        """Offer the pair ``key -> value`` to both directions."""

        if self._frozen:
            raise RuntimeError(f"Position map '{self.name}' is frozen")

        stored_value = self._forward.get(key)
        stored_key = self._reverse.get(value)
        if stored_value == value and stored_key == key:
            return

        key_clash = stored_value is not None and stored_value != value
        value_clash = stored_key is not None and stored_key != key

        if self.policy is ConflictPolicy.STRICT:
            if key_clash or value_clash:
                clashes = []
                if key_clash:
                    clashes.append(f"{key} already maps to {stored_value}")
                if value_clash:
                    clashes.append(f"{stored_key} already maps to {value}")
                raise PositionConflictError(
                    f"Cannot map {key} -> {value} in '{self.name}': {' and '.join(clashes)}."
                )
            self._forward[key] = value
            self._reverse[value] = key
            return

        if self.policy is ConflictPolicy.LAST:
            if key_clash:
                evicted = self._forward.pop(key)
                if self._reverse.get(evicted) == key:
                    del self._reverse[evicted]
                LOGGER.debug("%s: %d -> %d replaced by %d -> %d", self.name, key, evicted, key, value)
            if value_clash:
                evicted_key = self._reverse.pop(value)
                if self._forward.get(evicted_key) == value:
                    del self._forward[evicted_key]
                LOGGER.debug(
                    "%s: %d -> %d replaced by %d -> %d", self.name, evicted_key, value, key, value
                )
            self._forward[key] = value
            self._reverse[value] = key
            return

        if key_clash:
            LOGGER.debug(
                "%s: keeping %d -> %d, dropping forward %d -> %d",
                self.name,
                key,
                stored_value,
                key,
                value,
            )
        elif stored_value is None:
            self._forward[key] = value

        if value_clash:
            LOGGER.debug(
                "%s: keeping %d <- %d, dropping reverse %d <- %d",
                self.name,
                value,
                stored_key,
                value,
                key,
            )
        elif stored_key is None:
            self._reverse[value] = key
