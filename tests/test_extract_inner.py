"""Tests for extract_inner() and format_json() in sidediff/parsing."""

from __future__ import annotations

import json
import logging

from sidediff.parsing import RecoveryStrategy, extract_inner, format_json, parse


class TestExtractInner:
    """Tests for drilling into serialized payload fields."""

    def test_payload_field(self):
        """A string field holding an object is parsed and returned."""
        text = json.dumps({"meta": "x", "payload": json.dumps({"id": 1})})
        result = extract_inner(text)
        assert result.ok is True
        assert result.value == {"id": 1}

    def test_first_qualifying_field_wins(self):
        """Fields are scanned in order and the first parsable one is used."""
        text = json.dumps({
            "first": json.dumps([1, 2]),
            "second": json.dumps({"b": 2}),
        })
        assert extract_inner(text).value == [1, 2]

    def test_unparsable_candidate_is_skipped(self):
        """A field that only looks like JSON does not stop the scan."""
        text = json.dumps({"broken": "{not json}", "good": json.dumps({"ok": True})})
        assert extract_inner(text).value == {"ok": True}

    def test_bare_fragment_carrier(self, fixtures_dir):
        """The payload of a brace-wrapped fragment is extracted."""
        text = (fixtures_dir / "bare_fragment.txt").read_text(encoding="utf-8")
        result = extract_inner(text)
        assert result.value == {"reqid": "42", "amount": 10}
        assert result.strategy is RecoveryStrategy.DIRECT

    def test_no_candidate_returns_outer(self):
        """Without a payload field the outer result is returned unchanged."""
        outer = extract_inner('{"a": 1, "b": "text"}')
        assert outer == parse('{"a": 1, "b": "text"}')

    def test_non_object_returns_outer(self):
        """Arrays and scalars are not drilled into."""
        assert extract_inner('["{\\"a\\": 1}"]').value == ['{"a": 1}']

    def test_failure_passes_through(self):
        """A failed outer parse is returned as is."""
        result = extract_inner("")
        assert result.ok is False
        assert result.error == "empty or non-string input"


class TestFormatJson:
    """Tests for pretty-printing values."""

    def test_default_indent(self):
        """Values are formatted with two-space indentation."""
        assert format_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}'

    def test_custom_indent(self):
        """The indent width is configurable."""
        assert format_json({"a": 1}, indent=4) == '{\n    "a": 1\n}'

    def test_non_ascii_kept(self):
        """Non-ASCII characters are written literally."""
        assert format_json("é") == '"é"'

    def test_unserializable_falls_back_to_str(self, caplog):
        """Values json cannot encode fall back to their string form."""
        caplog.set_level(logging.DEBUG, logger="sidediff.parsing")
        assert format_json({1, 2}) == str({1, 2})
        assert "Falling back to str()" in caplog.text

    def test_cycle_falls_back_to_str(self):
        """Self-referencing structures do not raise."""
        value: list = []
        value.append(value)
        assert format_json(value) == "[[...]]"
