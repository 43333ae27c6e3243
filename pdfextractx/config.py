"""Configuration objects and ligature table loading."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .constants import DEFAULT_LIGATURES
from .exceptions import InvalidLigatureTableError
from .position_map import ConflictPolicy
from .utils import resolve_path

__all__ = [
    "ExtractOptions",
    "load_ligature_table",
    "load_options",
    "validate_ligature_table",
]


def validate_ligature_table(table: Mapping[Any, Any]) -> dict[str, str]:
    """Return a plain copy of ``table`` after checking every entry."""

    if not isinstance(table, Mapping):
        raise InvalidLigatureTableError(
            f"Ligature table must be a mapping, got {type(table).__name__}."
        )

    validated: dict[str, str] = {}
    for key, replacement in table.items():
        if not isinstance(key, str) or not key:
            raise InvalidLigatureTableError(f"Ligature keys must be non-empty strings, got {key!r}.")
        if not isinstance(replacement, str) or not replacement:
            raise InvalidLigatureTableError(
                f"Ligature {key!r} must expand to a non-empty string, got {replacement!r}."
            )
        validated[key] = replacement
    return validated


def load_ligature_table(path: str | Path) -> dict[str, str]:
    """Load a ``{"ligature": "expansion"}`` JSON object from ``path``."""

    source = resolve_path(path)
    try:
        with source.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise InvalidLigatureTableError(f"Ligature table not found: {source}") from exc
    except json.JSONDecodeError as exc:
        raise InvalidLigatureTableError(
            f"Ligature table {source} is not valid JSON: {exc}"
        ) from exc
    return validate_ligature_table(data)


@dataclass(slots=True)
class ExtractOptions:
    """Options controlling how an extraction dump is turned into a document."""

    ligatures: Mapping[str, str] = field(default_factory=lambda: DEFAULT_LIGATURES)
    conflict_policy: ConflictPolicy = ConflictPolicy.FIRST
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.ligatures = MappingProxyType(validate_ligature_table(self.ligatures))
        self.conflict_policy = ConflictPolicy(self.conflict_policy)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base_dir: Path | None = None) -> "ExtractOptions":
        """Build options from a parsed config file.

        ``ligatures`` may be an inline object or the path of a ligature table
        file, resolved against ``base_dir``.
        """

        unknown = set(data) - {"ligatures", "conflict_policy", "encoding"}
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        options = cls()
        ligatures = data.get("ligatures")
        if isinstance(ligatures, str):
            table_path = Path(ligatures)
            if base_dir is not None and not table_path.is_absolute():
                table_path = base_dir / table_path
            options = replace(options, ligatures=load_ligature_table(table_path))
        elif ligatures is not None:
            options = replace(options, ligatures=ligatures)
        if "conflict_policy" in data:
            options = replace(options, conflict_policy=data["conflict_policy"])
        if "encoding" in data:
            options = replace(options, encoding=data["encoding"])
        return options


def load_options(path: str | Path | None = None, **overrides: Any) -> ExtractOptions:
    """Read options from a JSON config file and apply keyword overrides.

    Overrides set to ``None`` are ignored.
    """

    if path is None:
        options = ExtractOptions()
    else:
        source = resolve_path(path)
        with source.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, Mapping):
            raise ValueError(f"Configuration file {source} must contain a JSON object")
        options = ExtractOptions.from_dict(data, base_dir=source.parent)

    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        options = replace(options, **updates)
    return options
