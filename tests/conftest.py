from __future__ import annotations

import json
from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfextractx import PdfExtractDocument  # noqa: E402

# "The", a draw operation, the "ﬁ" ligature, "n", an unmapped glyph, "al".
SAMPLE_DUMP = "\n".join(
    [
        "1\tT\t10.0 700.0 6.1 9.0",
        "1\th\t16.1 700.0 5.0 9.0",
        "1\te\t21.1 700.0 4.4 9.0",
        "1\t[DRAW_LINE]\t",
        "1\tﬁ\t27.0 700.0 5.5 9.0",
        "1\tn\t32.5 700.0 5.0 9.0",
        "1\tNO_UNICODE\t",
        "1\ta\t37.5 700.0 4.4 9.0",
        "1\tl\t41.9 700.0 2.8 9.0",
    ]
) + "\n"


@pytest.fixture()
def sample_dump() -> str:
    return SAMPLE_DUMP


@pytest.fixture()
def sample_document(sample_dump: str) -> PdfExtractDocument:
    return PdfExtractDocument.from_text(sample_dump, {"ﬁ": "fi"})


@pytest.fixture()
def dump_file(tmp_path: Path, sample_dump: str) -> Path:
    path = tmp_path / "page.txt"
    path.write_text(sample_dump, encoding="utf-8")
    return path


@pytest.fixture()
def ligature_file(tmp_path: Path) -> Path:
    path = tmp_path / "ligatures.json"
    with path.open("w", encoding="utf-8") as handle:
        json.dump({"ﬁ": "fi", "ﬂ": "fl"}, handle, ensure_ascii=False)
    return path
