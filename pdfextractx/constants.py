"""Shared constants for the extraction dump format."""

from __future__ import annotations

import re
from types import MappingProxyType

__all__ = [
    "COLUMN_SEPARATOR",
    "DEFAULT_LIGATURES",
    "DRAW_OPERATION_PATTERN",
    "NO_UNICODE",
    "PAGE_PATTERN",
]

COLUMN_SEPARATOR = "\t"
NO_UNICODE = "NO_UNICODE"
DRAW_OPERATION_PATTERN = re.compile(r"\[.*\]")
PAGE_PATTERN = re.compile(r"[0-9]+")

DEFAULT_LIGATURES = MappingProxyType(
    {
        "ﬁ": "fi",
        "ﬂ": "fl",
        "ﬃ": "ffi",
        "ﬄ": "ffl",
        "ﬀ": "ff",
        "ﬅ": "st",
        "ﬆ": "st",
    }
)
