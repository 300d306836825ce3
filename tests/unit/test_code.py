"""Tests for code normalization."""

from exercism.submissions.code import normalize_code


class TestNormalizeCode:
    def test_strips_trailing_newlines(self):
        assert normalize_code("\nCODE1\n\nCODE2\n\n\n") == "\nCODE1\n\nCODE2"

    def test_keeps_leading_and_inner_newlines(self):
        assert normalize_code("\n\nA\n\nB") == "\n\nA\n\nB"

    def test_keeps_other_trailing_whitespace(self):
        assert normalize_code("CODE  \t\n") == "CODE  \t"

    def test_only_newlines(self):
        assert normalize_code("\n\n") == ""

    def test_empty(self):
        assert normalize_code("") == ""
