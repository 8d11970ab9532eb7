"""
Tests for ordinalize, asciify and parameterize.
"""

import pytest

from inflections.text import asciify, ordinalize, parameterize, parameterize_join


class TestOrdinalize:
    @pytest.mark.parametrize(
        "number,expected",
        [
            ("0", "0th"),
            ("1", "1st"),
            ("2", "2nd"),
            ("3", "3rd"),
            ("4", "4th"),
            ("11", "11th"),
            ("12", "12th"),
            ("13", "13th"),
            ("21", "21st"),
            ("22", "22nd"),
            ("23", "23rd"),
            ("101", "101st"),
            ("111", "111th"),
            ("113", "113th"),
            ("1031", "1031st"),
        ],
    )
    def test_suffixes(self, number, expected):
        assert ordinalize(number) == expected

    def test_negative_numbers(self):
        """The suffix ignores the sign."""
        assert ordinalize("-1") == "-1st"
        assert ordinalize("-12") == "-12th"

    def test_canonical_number(self):
        assert ordinalize("+3") == "3rd"
        assert ordinalize("007") == "7th"

    @pytest.mark.parametrize("value", ["", "abc", "1.5", "1e3", " 1", "1_000"])
    def test_non_integer_unchanged(self, value):
        assert ordinalize(value) == value


class TestAsciify:
    def test_lowercase(self):
        assert asciify("café") == "cafe"
        assert asciify("naïve façade") == "naive facade"

    def test_uppercase(self):
        assert asciify("ÀÉÎÕÜ") == "AEIOU"

    def test_multi_letter_forms(self):
        assert asciify("Æsir") == "AEsir"
        assert asciify("straße") == "strasse"

    def test_ascii_unchanged(self):
        assert asciify("plain text") == "plain text"


class TestParameterize:
    def test_parameterize(self):
        assert parameterize("Donald E. Knuth") == "donald-e-knuth"

    def test_squashes_and_trims(self):
        assert parameterize("  Hello   World!  ") == "hello-world"

    def test_folds_accents(self):
        assert parameterize("Café au lait") == "cafe-au-lait"

    def test_keeps_underscores_and_dashes(self):
        assert parameterize("snake_case-name") == "snake_case-name"

    def test_custom_separator(self):
        assert parameterize_join("Donald E. Knuth", "_") == "donald_e_knuth"
        assert parameterize_join("a  b", "+") == "a+b"

    def test_empty_separator(self):
        assert parameterize_join("Donald E. Knuth", "") == "donaldeknuth"
