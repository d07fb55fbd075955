"""Tests for formulagen.template_engine."""

import pytest

from formulagen.errors import MissingValueError
from formulagen.template_engine import placeholders, render_string, render_template


class TestPlaceholders:
    def test_first_appearance_order(self):
        assert placeholders("{{b}} {{a}} {{b}}") == ["b", "a"]

    def test_single_braces_ignored(self):
        assert placeholders("{a} {{b}}") == ["b"]

    def test_none(self):
        assert placeholders("plain text") == []


class TestRenderString:
    def test_basic_replacement(self):
        result = render_string("hello {{name}}", {"name": "world"})
        assert result == "hello world"

    def test_multiple_replacements(self):
        result = render_string("{{a}} and {{b}}", {"a": "X", "b": "Y"})
        assert result == "X and Y"

    def test_repeated_placeholder(self):
        result = render_string("{{a}}/{{a}}", {"a": "x"})
        assert result == "x/x"

    def test_single_braces_kept_literally(self):
        result = render_string("d = {key: {{v}}}", {"v": "1", "key": "nope"})
        assert result == "d = {key: 1}"

    def test_no_replacement_needed(self):
        result = render_string("no placeholders here", {})
        assert result == "no placeholders here"

    def test_extra_keys_ignored(self):
        result = render_string("{{a}}", {"a": "X", "unused": "Y"})
        assert result == "X"

    def test_values_are_not_reexpanded(self):
        result = render_string("{{a}} {{b}}", {"a": "{{b}}", "b": "B"})
        assert result == "{{b}} B"

    def test_numeric_values(self):
        result = render_string("port={{port}}", {"port": 8000})
        assert result == "port=8000"

    def test_multiline(self):
        template = "line1={{a}}\nline2={{b}}"
        result = render_string(template, {"a": "1", "b": "2"})
        assert result == "line1=1\nline2=2"

    def test_missing_raises_naming_all(self):
        with pytest.raises(MissingValueError) as exc_info:
            render_string("{{a}} {{c}} {{b}}", {"a": "X"})
        assert exc_info.value.missing == ["c", "b"]
        assert "c" in str(exc_info.value)
        assert "b" in str(exc_info.value)

    def test_missing_value_error_is_value_error(self):
        with pytest.raises(ValueError, match="Missing value"):
            render_string("{{a}}", {})

    def test_non_strict_leaves_placeholder(self):
        result = render_string("{{a}} and {{b}}", {"a": "X"}, strict=False)
        assert result == "X and {{b}}"

    def test_rerender_is_noop(self):
        once = render_string("v={{v}}", {"v": "1.0.0"})
        assert render_string(once, {"v": "2.0.0"}) == once

    def test_deterministic(self):
        values = {"a": "1", "b": "2"}
        assert render_string("{{a}}{{b}}", values) == render_string("{{a}}{{b}}", values)


class TestRenderTemplate:
    def test_reads_file_and_replaces(self, tmp_path):
        path = tmp_path / "formula.rb.tpl"
        path.write_text('version "{{version}}" bin "{{bin}}"')
        result = render_template(path, {"version": "1.2.3", "bin": "tpaws"})
        assert result == 'version "1.2.3" bin "tpaws"'

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "t.txt"
        path.write_text("{{x}}")
        assert render_template(str(path), {"x": "ok"}) == "ok"

    def test_missing_in_file_raises(self, tmp_path):
        path = tmp_path / "t.txt"
        path.write_text("{{x}} {{y}}")
        with pytest.raises(MissingValueError, match="y"):
            render_template(path, {"x": "ok"})
