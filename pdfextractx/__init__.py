"""
pdfextractx - Position mapping for PDF glyph extraction dumps.

This library parses a page's glyph-level extraction dump, derives the
content string (text glyphs only) and a ligature-expanded string, and keeps
exact index correspondence between the three so an editor offset can be
traced back to the extraction line that produced it.

Quick Start:
    >>> from pdfextractx import PdfExtractDocument
    >>> document = PdfExtractDocument.from_text("1\\tﬁ\\t\\n1\\tx\\t", {"ﬁ": "fi"})
    >>> document.expanded_content
    'fix'
    >>> document.line_at(1).line_number
    1

Main Classes:
    - PdfExtractDocument: Read-only aggregate built from one dump
    - PositionTranslator: Offset/line lookups across the index maps
    - ExtractionParser: Dump parsing into glyph records
    - LigatureMatcher: Multi-pattern search over ligature keys
    - LigatureExpander: Ligature rewriting with position tracking
    - PositionMap: Bidirectional index map with a conflict policy

Exceptions:
    - PdfExtractError: Base exception
    - MalformedRecordError: Unparseable dump line
    - PositionNotFoundError: Offset or line without a mapping
    - LigatureConflictError: Ligature positions rejected by the strict policy
    - InvalidLigatureTableError: Unusable ligature table

For CLI usage, use the 'pdfextractx' command after installation.
"""

# Core classes
from pdfextractx.document import PdfExtractDocument
from pdfextractx.translator import PositionTranslator
from pdfextractx.parser import ExtractionParser, parse_extraction
from pdfextractx.matcher import LigatureMatcher
from pdfextractx.expander import LigatureExpander, expand_ligatures
from pdfextractx.position_map import ConflictPolicy, PositionMap

# Data types
from pdfextractx.types import (
    DocumentSummary,
    ExpandedContent,
    GlyphRecord,
    LigatureMatch,
    ParsedExtraction,
)

# Configuration
from pdfextractx.config import (
    ExtractOptions,
    load_ligature_table,
    load_options,
    validate_ligature_table,
)
from pdfextractx.constants import DEFAULT_LIGATURES, NO_UNICODE

# Exceptions
from pdfextractx.exceptions import (
    PdfExtractError,
    MalformedRecordError,
    PositionNotFoundError,
    PositionConflictError,
    LigatureConflictError,
    InvalidLigatureTableError,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "PdfExtractDocument",
    "PositionTranslator",
    "ExtractionParser",
    "parse_extraction",
    "LigatureMatcher",
    "LigatureExpander",
    "expand_ligatures",
    "ConflictPolicy",
    "PositionMap",
    # Data types
    "DocumentSummary",
    "ExpandedContent",
    "GlyphRecord",
    "LigatureMatch",
    "ParsedExtraction",
    # Configuration
    "ExtractOptions",
    "load_ligature_table",
    "load_options",
    "validate_ligature_table",
    "DEFAULT_LIGATURES",
    "NO_UNICODE",
    # Exceptions
    "PdfExtractError",
    "MalformedRecordError",
    "PositionNotFoundError",
    "PositionConflictError",
    "LigatureConflictError",
    "InvalidLigatureTableError",
    # Version info
    "__version__",
]
