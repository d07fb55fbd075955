"""Exceptions raised while rendering formulas."""

from __future__ import annotations

from typing import Optional


class MissingValueError(ValueError):
    """A template references placeholders that have no value."""

    def __init__(self, missing: list[str], fields: Optional[dict[str, str]] = None):
        self.missing = list(missing)
        self.fields = dict(fields or {})
        super().__init__(self._format())

    def _format(self) -> str:
        names = []
        for name in self.missing:
            field = self.fields.get(name)
            if field and field != name:
                names.append(f"{name} ({field})")
            else:
                names.append(name)
        return f"Missing value for placeholder(s): {', '.join(names)}"


class FormulaConfigError(ValueError):
    """Formula config file is malformed."""
