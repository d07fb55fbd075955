"""Formula config dataclass and YAML loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

import yaml

from formulagen.errors import FormulaConfigError
from formulagen.models import FormulaValues
from formulagen.templates import LATEST, TEMPLATES


@dataclass
class FormulaConfig:
    values: FormulaValues = field(default_factory=FormulaValues)
    channel: str = LATEST
    output_dir: Optional[str] = None


_TOP_LEVEL_KEYS = frozenset({"formula", "channel", "output_dir"})


def load_formula_config(path: str) -> FormulaConfig:
    """Load formula values and output settings from a YAML file.

    Unknown keys cause a ``FormulaConfigError`` so typos are caught early.
    Values may be partial; missing ones surface when rendering.
    """
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise FormulaConfigError(
            f"Formula config YAML must be a mapping, got {type(raw).__name__}"
        )

    unknown = set(raw) - _TOP_LEVEL_KEYS
    if unknown:
        raise FormulaConfigError(
            f"Unknown top-level keys in formula config: {sorted(unknown, key=str)}. "
            f"Allowed: {sorted(_TOP_LEVEL_KEYS)}"
        )

    formula_raw = raw.get("formula", {}) or {}
    if not isinstance(formula_raw, dict):
        raise FormulaConfigError(
            f"'formula' must be a mapping, got {type(formula_raw).__name__}"
        )
    try:
        values = FormulaValues.from_mapping(formula_raw)
    except ValueError as exc:
        raise FormulaConfigError(str(exc)) from None

    channel = raw.get("channel") or LATEST
    if not isinstance(channel, str) or channel not in TEMPLATES:
        raise FormulaConfigError(
            f"Unknown channel '{channel}'. Allowed: {sorted(TEMPLATES)}"
        )

    output_dir = raw.get("output_dir")
    return FormulaConfig(
        values=values,
        channel=channel,
        output_dir=str(output_dir) if output_dir is not None else None,
    )


def resolve_values(
    config: FormulaConfig, overrides: Optional[Mapping[str, object]] = None
) -> FormulaValues:
    """Config values with caller overrides on top (None overrides are skipped)."""
    if not overrides:
        return config.values
    present = {k: v for k, v in overrides.items() if v is not None}
    return config.values.merged(FormulaValues.from_mapping(present))
