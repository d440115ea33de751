"""
Tests for JavaScript string literal quoting.
"""

import pytest

from ilib_scanner.emitters.literals import js_str


@pytest.mark.parametrize(
  "value, quote, expected",
  [
    ("ilib", "'", "'ilib'"),
    ("ilib", '"', '"ilib"'),
    ("it's", "'", "'it\\'s'"),
    ("it's", '"', '"it\'s"'),
    ('say "hi"', '"', '"say \\"hi\\""'),
    ('say "hi"', "'", "'say \"hi\"'"),
    ("a\\b", '"', '"a\\\\b"'),
    ("two\nlines", "'", "'two\\nlines'"),
  ],
)
def test_js_str(value, quote, expected):
  assert js_str(value, quote) == expected
