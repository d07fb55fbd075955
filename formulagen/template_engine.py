"""Simple template engine — reads a file, replaces {{key}} placeholders."""

from __future__ import annotations

import re
from pathlib import Path

from formulagen.errors import MissingValueError

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def placeholders(template: str) -> list[str]:
    """Return placeholder names in order of first appearance."""
    seen: list[str] = []
    for name in _PLACEHOLDER.findall(template):
        if name not in seen:
            seen.append(name)
    return seen


def _single_pass_replace(
    content: str, replacements: dict[str, str], strict: bool
) -> str:
    """Replace {{key}} placeholders in a single pass (prevents injection)."""
    if strict:
        missing = [k for k in placeholders(content) if k not in replacements]
        if missing:
            raise MissingValueError(missing)

    def _replacer(m: re.Match) -> str:
        key = m.group(1)
        return str(replacements[key]) if key in replacements else m.group(0)

    return _PLACEHOLDER.sub(_replacer, content)


def render_template(
    template_path: str | Path, replacements: dict[str, str], *, strict: bool = True
) -> str:
    """Read template file, replace {{key}} placeholders, return rendered string.

    With ``strict`` (the default) every placeholder must have a value, else
    ``MissingValueError`` is raised naming all of them. With ``strict=False``
    unresolved placeholders are left as-is.
    """
    content = Path(template_path).read_text(encoding="utf-8")
    return _single_pass_replace(content, replacements, strict)


def render_string(
    template: str, replacements: dict[str, str], *, strict: bool = True
) -> str:
    """Same as render_template but operates on a string directly."""
    return _single_pass_replace(template, replacements, strict)
