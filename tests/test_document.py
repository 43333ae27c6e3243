from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from pdfextractx import (
    ConflictPolicy,
    ExtractOptions,
    LigatureConflictError,
    MalformedRecordError,
    PdfExtractDocument,
    PositionNotFoundError,
)


def test_three_representations(sample_document: PdfExtractDocument, sample_dump: str) -> None:
    assert sample_document.raw_text == sample_dump
    assert sample_document.content == "Theﬁnal"
    assert sample_document.expanded_content == "Thefinal"


def test_line_at_resolves_through_both_maps(sample_document: PdfExtractDocument) -> None:
    assert sample_document.line_at(0).value == "T"
    assert sample_document.line_at(3).line_number == 5
    assert sample_document.line_at(4).line_number == 5
    assert sample_document.line_at(5).value == "n"
    assert sample_document.line_at(7).line_number == 9


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_line_at_out_of_range(sample_document: PdfExtractDocument, index: int) -> None:
    with pytest.raises(PositionNotFoundError):
        sample_document.line_at(index)


def test_expanded_index_of(sample_document: PdfExtractDocument) -> None:
    assert sample_document.expanded_index_of(1) == 0
    assert sample_document.expanded_index_of(5) == 3
    assert sample_document.expanded_index_of(6) == 5
    assert sample_document.expanded_index_of(9) == 7


@pytest.mark.parametrize(("line_number", "fragment"), [(4, "draw operation"), (7, "unmapped glyph")])
def test_expanded_index_of_non_content_line(
    sample_document: PdfExtractDocument, line_number: int, fragment: str
) -> None:
    with pytest.raises(PositionNotFoundError) as excinfo:
        sample_document.expanded_index_of(line_number)
    assert fragment in str(excinfo.value)


def test_expanded_index_of_unknown_line(sample_document: PdfExtractDocument) -> None:
    with pytest.raises(PositionNotFoundError):
        sample_document.expanded_index_of(42)


def test_round_trip_is_stable_for_content_lines(sample_document: PdfExtractDocument) -> None:
    for record in sample_document.records.values():
        if not record.is_content:
            continue
        index = sample_document.expanded_index_of(record.line_number)
        back = sample_document.line_at(index)
        assert sample_document.expanded_index_of(back.line_number) == index


@pytest.mark.parametrize("policy", [ConflictPolicy.FIRST, ConflictPolicy.LAST])
def test_round_trip_with_contraction(policy: ConflictPolicy) -> None:
    dump = "\n".join(f"1\t{char}\t" for char in "office")
    document = PdfExtractDocument.from_text(dump, {"ffi": "fi"}, conflict_policy=policy)

    assert document.expanded_content == "ofice"
    for line_number in document.records:
        try:
            index = document.expanded_index_of(line_number)
        except PositionNotFoundError:
            continue
        assert document.expanded_index_of(document.line_at(index).line_number) == index


def test_lines_in_range(sample_document: PdfExtractDocument) -> None:
    lines = sample_document.lines_in_range(2, 5)

    assert [record.line_number for record in lines] == [3, 5, 5, 6]
    assert sample_document.lines_in_range(5, 4) == []


def test_lines_in_range_fails_entirely_on_unresolved_index(sample_document: PdfExtractDocument) -> None:
    with pytest.raises(PositionNotFoundError):
        sample_document.lines_in_range(6, 8)


def test_lines_in_range_fails_on_gap_left_by_overwrite() -> None:
    document = PdfExtractDocument.from_text(
        "1\ta\t\n1\t[DRAW]\t\n1\tﬃ\t\n1\tb\t", {"ﬃ": "ffi"}, conflict_policy="last"
    )

    assert document.expanded_content == "affib"
    assert document.line_at(3).line_number == 3
    with pytest.raises(PositionNotFoundError):
        document.lines_in_range(0, 4)


def test_record_lookup(sample_document: PdfExtractDocument) -> None:
    draw = sample_document.record(4)

    assert draw.value == "[DRAW_LINE]"
    assert draw.display_positions == ""
    assert sample_document.record(5).display_positions == "27.0 700.0 5.5 9.0"
    with pytest.raises(PositionNotFoundError):
        sample_document.record(0)


def test_document_is_read_only(sample_document: PdfExtractDocument) -> None:
    with pytest.raises(RuntimeError):
        sample_document.content_map.put(99, 99)
    with pytest.raises(RuntimeError):
        sample_document.expanded_map.put(99, 99)
    with pytest.raises(TypeError):
        sample_document.records[99] = sample_document.record(1)  # type: ignore[index]
    with pytest.raises(AttributeError):
        sample_document.content = "changed"  # type: ignore[misc]


def test_summary(sample_document: PdfExtractDocument) -> None:
    summary = sample_document.summary()

    assert summary.total_records == 9
    assert summary.content_records == 7
    assert summary.draw_operations == 1
    assert summary.unmapped_glyphs == 1
    assert summary.pages == [1]
    assert summary.ligatures == 1
    assert summary.content_length == 7
    assert summary.expanded_length == 8
    assert "ligatures=1" in str(summary)


def test_default_ligature_table_is_used() -> None:
    document = PdfExtractDocument.from_text("1\tﬂ\t\n1\ty\t")

    assert document.expanded_content == "fly"


def test_malformed_dump_produces_no_document() -> None:
    with pytest.raises(MalformedRecordError):
        PdfExtractDocument.from_text("abc\tX")


def test_strict_policy_surfaces_ligature_conflicts(sample_dump: str) -> None:
    with pytest.raises(LigatureConflictError):
        PdfExtractDocument.from_text(sample_dump, {"ﬁ": "fi"}, conflict_policy="strict")


def test_from_file(dump_file: Path) -> None:
    document = PdfExtractDocument.from_file(dump_file, {"ﬁ": "fi"})

    assert document.expanded_content == "Thefinal"
    assert document.ligature_matches[0].keyword == "ﬁ"


def test_from_file_with_options(dump_file: Path) -> None:
    options = ExtractOptions(ligatures={"ﬁ": "FI"})
    document = PdfExtractDocument.from_file(dump_file, options=options)

    assert document.expanded_content == "TheFInal"


def test_from_file_rejects_invalid_utf8(tmp_path: Path) -> None:
    dump = tmp_path / "bad.txt"
    dump.write_bytes(b"1\tA\t\n1\t\xff\t\n")

    with pytest.raises(MalformedRecordError, match="is not valid utf-8"):
        PdfExtractDocument.from_file(dump)


def test_unicode_space_glyph_resolves_to_its_line() -> None:
    document = PdfExtractDocument.from_text("1\ta\t\n1\t\u00a0\t1 2 3 4\n1\tb\t")

    assert document.content == "a\u00a0b"
    assert document.line_at(1).value == "\u00a0"
    assert document.expanded_index_of(2) == 1


def test_concurrent_readers_see_the_same_answers(sample_document: PdfExtractDocument) -> None:
    expected = [sample_document.line_at(index) for index in range(8)]

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(lambda _: [sample_document.line_at(i) for i in range(8)], range(16)))

    assert all(result == expected for result in results)
