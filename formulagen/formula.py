"""Render formula templates and write them out as ``<bin>.rb`` files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from formulagen.errors import MissingValueError
from formulagen.models import FormulaValues, RenderedFormula, check_bin_name
from formulagen.template_engine import placeholders, render_string
from formulagen.templates import FORMULA_FIELDS, LATEST, get_template

logger = logging.getLogger(__name__)

ValuesLike = Union[FormulaValues, Mapping[str, object]]


def _output_dir() -> Path:
    """Return the default output directory, respecting FORMULAGEN_OUTPUT_DIR."""
    env = os.environ.get("FORMULAGEN_OUTPUT_DIR")
    if env:
        return Path(env)
    return Path.cwd()


def _coerce(values: ValuesLike) -> FormulaValues:
    if isinstance(values, FormulaValues):
        return values
    return FormulaValues.from_mapping(values)


def render_formula(
    values: ValuesLike,
    channel: str = LATEST,
    *,
    template: Optional[str] = None,
) -> RenderedFormula:
    """Render the formula for ``channel`` (or a caller-supplied template).

    Raises ``MissingValueError`` if any placeholder has no value. The binary
    name is always required since it names the output file.
    """
    values = _coerce(values)
    text = template if template is not None else get_template(channel)
    replacements = values.as_replacements()

    missing = [k for k in placeholders(text) if k not in replacements]
    if values.bin is None and "bin" not in missing:
        missing.append("bin")
    if missing:
        raise MissingValueError(missing, FORMULA_FIELDS)
    check_bin_name(values.bin)

    rendered = render_string(text, replacements)
    logger.debug("Rendered %s formula for %s %s", channel, values.bin, values.version)
    return RenderedFormula(bin=values.bin, channel=channel, text=rendered)


def write_formula(
    rendered: RenderedFormula, out_dir: Optional[Union[str, Path]] = None
) -> Path:
    """Write ``<bin>.rb`` into ``out_dir`` and return its path."""
    directory = Path(out_dir) if out_dir else _output_dir()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / rendered.filename
    path.write_text(rendered.text, encoding="utf-8")
    rendered.path = path
    logger.info("Wrote formula %s", path)
    return path


def generate_formula(
    values: ValuesLike,
    channel: str = LATEST,
    out_dir: Optional[Union[str, Path]] = None,
) -> RenderedFormula:
    """Render and write in one step; nothing is written if rendering fails."""
    rendered = render_formula(values, channel)
    write_formula(rendered, out_dir)
    return rendered
