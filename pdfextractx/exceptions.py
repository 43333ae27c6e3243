"""
Custom exceptions for pdfextractx.

This module defines all custom exceptions used throughout the library.
"""

from __future__ import annotations


class PdfExtractError(Exception):
    """Base exception for all pdfextractx errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown extraction mapping error occurred."


class MalformedRecordError(PdfExtractError):
    """Raised when a line of the extraction dump cannot be parsed."""

    def __init__(
        self,
        message: str = "",
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        if message and line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line

    @property
    def default_message(self) -> str:
        return "Malformed extraction record."


class PositionNotFoundError(PdfExtractError):
    """Raised when an index or line does not resolve through the position maps."""

    @property
    def default_message(self) -> str:
        return "Position could not be resolved."


class PositionConflictError(PdfExtractError):
    """Raised when two positions compete for the same slot of a position map."""

    @property
    def default_message(self) -> str:
        return "Conflicting positions in index map."


class LigatureConflictError(PositionConflictError):
    """Raised when a ligature rewrite produces conflicting index mappings."""

    @property
    def default_message(self) -> str:
        return "Ligature expansion produced conflicting positions."


class InvalidLigatureTableError(PdfExtractError):
    """Raised when the ligature table cannot be used for matching."""

    @property
    def default_message(self) -> str:
        return "Invalid ligature table."


__all__ = [
    "PdfExtractError",
    "MalformedRecordError",
    "PositionNotFoundError",
    "PositionConflictError",
    "LigatureConflictError",
    "InvalidLigatureTableError",
]
