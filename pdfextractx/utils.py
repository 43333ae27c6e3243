"""Utilities shared by pdfextractx modules."""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import MalformedRecordError


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    resolved = Path(path).expanduser().resolve()
    return resolved


def read_extraction(path: str | Path, encoding: str = "utf-8") -> str:
    """Read an extraction dump from disk.

    Newlines are kept as written so that ``\\r\\n`` dumps parse the same as
    ``\\n`` dumps; column trimming removes the stray carriage returns.
    """

    source = resolve_path(path)
    try:
        with source.open("r", encoding=encoding, newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise MalformedRecordError(
            f"Extraction dump {source} is not valid {encoding}: {exc}"
        ) from exc


def format_index_range(start: int, end: int) -> str:
    if start == end:
        return str(start)
    return f"{start}-{end}"


__all__ = ["get_logger", "resolve_path", "read_extraction", "format_index_range"]
