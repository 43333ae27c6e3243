from __future__ import annotations

import json
from pathlib import Path

import pytest

from pdfextractx.config import (
    ExtractOptions,
    load_ligature_table,
    load_options,
    validate_ligature_table,
)
from pdfextractx.constants import DEFAULT_LIGATURES
from pdfextractx.exceptions import InvalidLigatureTableError
from pdfextractx.position_map import ConflictPolicy


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def test_default_options() -> None:
    options = ExtractOptions()

    assert dict(options.ligatures) == dict(DEFAULT_LIGATURES)
    assert options.conflict_policy is ConflictPolicy.FIRST
    assert options.encoding == "utf-8"


def test_options_coerce_policy_and_freeze_table() -> None:
    table = {"ﬁ": "fi"}
    options = ExtractOptions(ligatures=table, conflict_policy="strict")

    table["ﬂ"] = "fl"
    assert options.conflict_policy is ConflictPolicy.STRICT
    assert dict(options.ligatures) == {"ﬁ": "fi"}
    with pytest.raises(TypeError):
        options.ligatures["ﬀ"] = "ff"  # type: ignore[index]


@pytest.mark.parametrize(
    "table",
    [{"": "x"}, {"ﬁ": ""}, {"ﬁ": None}, {1: "one"}, ["ﬁ", "fi"]],
)
def test_validate_ligature_table_rejects_bad_entries(table) -> None:
    with pytest.raises(InvalidLigatureTableError):
        validate_ligature_table(table)


def test_load_ligature_table(ligature_file: Path) -> None:
    assert load_ligature_table(ligature_file) == {"ﬁ": "fi", "ﬂ": "fl"}


def test_load_ligature_table_errors(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidLigatureTableError):
        load_ligature_table(broken)
    with pytest.raises(InvalidLigatureTableError):
        load_ligature_table(tmp_path / "missing.json")
    with pytest.raises(InvalidLigatureTableError):
        load_ligature_table(_write_json(tmp_path / "list.json", ["ﬁ"]))


def test_load_options_from_config_with_relative_table(tmp_path: Path, ligature_file: Path) -> None:
    config = _write_json(
        tmp_path / "config.json",
        {"ligatures": ligature_file.name, "conflict_policy": "last", "encoding": "latin-1"},
    )

    options = load_options(config)

    assert dict(options.ligatures) == {"ﬁ": "fi", "ﬂ": "fl"}
    assert options.conflict_policy is ConflictPolicy.LAST
    assert options.encoding == "latin-1"


def test_load_options_inline_table_and_overrides(tmp_path: Path) -> None:
    config = _write_json(tmp_path / "config.json", {"ligatures": {"ﬆ": "st"}})

    options = load_options(config, conflict_policy="strict", encoding=None)

    assert dict(options.ligatures) == {"ﬆ": "st"}
    assert options.conflict_policy is ConflictPolicy.STRICT
    assert options.encoding == "utf-8"


def test_load_options_without_file() -> None:
    options = load_options(ligatures={"ﬁ": "fi"})

    assert dict(options.ligatures) == {"ﬁ": "fi"}


def test_load_options_rejects_unknown_keys(tmp_path: Path) -> None:
    config = _write_json(tmp_path / "config.json", {"ligature": {}})

    with pytest.raises(ValueError):
        load_options(config)
