"""Data models for formula rendering."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Mapping, Optional

# Accepted spellings that map onto a placeholder name.
_ALIASES = {
    "sha256": "shasum",
    "desc": "description",
}


@dataclass
class FormulaValues:
    """Values substituted into a formula template.

    Every field is optional here so partial sets (e.g. from a config file)
    can be merged before rendering; the renderer enforces completeness.
    """

    description: Optional[str] = None
    homepage: Optional[str] = None
    repo: Optional[str] = None
    bin: Optional[str] = None
    shasum: Optional[str] = None  # sha256 of the release archive
    version: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> FormulaValues:
        """Build from a plain mapping; values must be strings or None.

        Non-string scalars are rejected rather than converted, since YAML
        turns ``1.10`` into the float ``1.1``.
        """
        allowed = {f.name for f in fields(cls)}
        normalized: dict[str, Optional[str]] = {}
        unknown = []
        for key, value in raw.items():
            name = _ALIASES.get(key, key)
            if name not in allowed:
                unknown.append(key)
                continue
            if name in normalized:
                raise ValueError(
                    f"Formula key '{key}' given more than once "
                    f"(as '{name}' and its alias)"
                )
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"Formula value '{key}' must be a string, got "
                    f"{type(value).__name__} {value!r}. Quote it in YAML, "
                    f"e.g. {key}: \"{value}\""
                )
            normalized[name] = value
        if unknown:
            raise ValueError(
                f"Unknown formula keys: {sorted(unknown, key=str)}. "
                f"Allowed: {sorted(allowed | set(_ALIASES))}"
            )
        return cls(**normalized)

    def as_replacements(self) -> dict[str, str]:
        """Return only the fields that have a value."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def merged(self, other: FormulaValues) -> FormulaValues:
        """Return a copy with every set field of ``other`` laid on top."""
        data = self.as_replacements()
        data.update(other.as_replacements())
        return FormulaValues(**data)


def check_bin_name(name: str) -> None:
    """Reject binary names that would not yield a plain ``<bin>.rb`` file name."""
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ValueError(
            f"Invalid binary name {name!r}: must be non-empty with no path separators"
        )


@dataclass
class RenderedFormula:
    """Fully substituted formula text, ready to write."""

    bin: str
    channel: str
    text: str
    path: Optional[Path] = None  # set once written to disk

    def __post_init__(self):
        check_bin_name(self.bin)

    @property
    def filename(self) -> str:
        return f"{self.bin}.rb"
