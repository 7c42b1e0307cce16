"""Tests for sidediff/parsing/unescape.py."""

from __future__ import annotations

import logging

import pytest

from sidediff.parsing import count_passthrough_escapes, unescape_json_string


class TestUnescapeSimple:
    """Tests for the single-character escapes."""

    @pytest.mark.parametrize(
        "escaped,expected",
        [
            (r'\"', '"'),
            (r"\\", "\\"),
            (r"\n", "\n"),
            (r"\r", "\r"),
            (r"\t", "\t"),
        ],
    )
    def test_each_escape(self, escaped, expected):
        """Each recognised escape decodes to its character."""
        assert unescape_json_string(escaped) == expected

    def test_escaped_object(self):
        """A doubly encoded object loses one escape layer."""
        assert unescape_json_string(r'{\"a\":\"b\"}') == '{"a":"b"}'

    def test_only_one_layer_removed(self):
        """Escaped backslash followed by a letter stays a JSON escape."""
        assert unescape_json_string(r"line1\\nline2") == r"line1\nline2"

    def test_plain_text_unchanged(self):
        """Text without backslashes is returned as is."""
        assert unescape_json_string('{"a": 1}') == '{"a": 1}'


class TestUnescapeUnicode:
    """Tests for \\u and \\U escapes."""

    def test_four_digit(self):
        """\\uXXXX decodes to the code point."""
        assert unescape_json_string(r"\u00e9") == "\u00e9"

    def test_surrogate_pair(self):
        """A high and low surrogate escape compose one character."""
        assert unescape_json_string(r"\ud83d\ude00") == "\U0001F600"

    def test_lone_high_surrogate(self):
        """A high surrogate without a partner decodes on its own."""
        assert unescape_json_string(r"\ud83dx") == "\ud83dx"

    def test_eight_digit(self):
        """\\UXXXXXXXX decodes to the code point."""
        assert unescape_json_string(r"\U0001F600") == "\U0001F600"

    def test_eight_digit_out_of_range(self):
        """Code points past the Unicode range are copied through."""
        assert unescape_json_string(r"\U00110000") == r"\U00110000"

    def test_short_hex_passes_through(self):
        """A \\u escape with fewer than four hex digits is copied through."""
        assert unescape_json_string(r"\u12") == r"\u12"


class TestUnescapePassthrough:
    """Tests for escapes the transform does not understand."""

    def test_unknown_escape(self):
        """Unknown escapes keep their backslash."""
        assert unescape_json_string(r"a\qb") == r"a\qb"

    def test_trailing_backslash(self):
        """A lone trailing backslash is kept."""
        assert unescape_json_string("abc\\") == "abc\\"

    def test_count(self):
        """Pass-through backslashes are counted."""
        assert count_passthrough_escapes(r"\q\"\z") == 2
        assert count_passthrough_escapes(r"\"\n") == 0

    def test_logs_passthrough(self, caplog):
        """Copied escapes are reported at debug level."""
        caplog.set_level(logging.DEBUG, logger="sidediff.parsing")
        unescape_json_string(r"\q")
        assert "Copied 1 unrecognised escape(s)" in caplog.text
