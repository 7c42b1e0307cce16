"""Tests for sidediff/render/values.py."""

from __future__ import annotations

import pytest

from sidediff.render import MISSING, DepthExceededError, escape_html, format_value
from sidediff.render.values import format_key, highlight


class TestFormatScalars:
    """Tests for scalar values."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (-12, "-12"),
            (1.5, "1.5"),
            ("text", '"text"'),
            ('say "hi"', '"say \\"hi\\""'),
            ("é", '"é"'),
        ],
    )
    def test_scalar(self, value, expected):
        """Scalars format as their JSON text."""
        assert format_value(value) == expected

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_is_null(self, value):
        """NaN and infinities have no JSON form and print as null."""
        assert format_value(value) == "null"
        assert format_value([value]) == "[\n  null\n]"

    def test_missing_is_empty(self):
        """An absent value formats as nothing."""
        assert format_value(MISSING) == ""
        assert not MISSING
        assert repr(MISSING) == "MISSING"

    def test_non_json_type(self):
        """Other objects format as a quoted string form."""
        assert format_value({1}) == '"{1}"'


class TestFormatContainers:
    """Tests for lists and mappings."""

    def test_empty(self):
        """Empty containers stay on one line."""
        assert format_value([]) == "[]"
        assert format_value({}) == "{}"

    def test_list(self):
        """One element per line, closing bracket at the current indent."""
        assert format_value([1, "a"]) == '[\n  1,\n  "a"\n]'

    def test_nested_with_indent(self):
        """The indent applies to inner lines and the closing bracket."""
        expected = '{\n      "a": [\n        1\n      ]\n    }'
        assert format_value({"a": [1]}, indent=4) == expected

    def test_custom_step(self):
        """The step controls spaces per level."""
        assert format_value({"a": 1}, step=4) == '{\n    "a": 1\n}'

    def test_key_order_preserved(self):
        """Mapping order is kept."""
        assert format_value({"b": 1, "a": 2}) == '{\n  "b": 1,\n  "a": 2\n}'

    def test_tuple_as_list(self):
        """Tuples format like lists."""
        assert format_value((1,)) == "[\n  1\n]"

    def test_depth_limit(self):
        """Containers nested past the limit raise DepthExceededError."""
        value: list = [[[[1]]]]
        with pytest.raises(DepthExceededError):
            format_value(value, max_depth=2)
        assert format_value(value, max_depth=4).count("[") == 4


class TestMarkup:
    """Tests for escaping and highlight helpers."""

    def test_escape_set(self):
        """Exactly & < > \" ' are escaped."""
        assert escape_html("&<>\"'/=") == "&amp;&lt;&gt;&quot;&#x27;/="

    def test_escape_is_single_pass(self):
        """Existing entities are escaped again, never skipped."""
        assert escape_html("&amp;") == "&amp;amp;"

    def test_format_key(self):
        """Keys are JSON-quoted strings."""
        assert format_key("a") == '"a"'
        assert format_key(1) == '"1"'

    def test_highlight(self):
        """Highlight wraps text in a classed span without escaping it."""
        assert highlight("&lt;b&gt;", "diff-added") == '<span class="diff-added">&lt;b&gt;</span>'
