"""Tests for substring and case helpers"""

import pytest

from stringext.exceptions import ValidationError
from stringext.text import (
    capitalize_first_letter,
    get_file_extension,
    get_first_characters,
    get_string_between,
)


class TestGetStringBetween:

    def test_simple(self):
        assert get_string_between("a[b]c", "[", "]") == "b"

    def test_missing_markers(self):
        assert get_string_between("abc", "[", "]") == ""
        assert get_string_between("a[bc", "[", "]") == ""
        assert get_string_between("ab]c", "[", "]") == ""

    def test_end_marker_only_before_start(self):
        """An end marker that precedes the start marker does not count"""
        assert get_string_between("a]b[c", "[", "]") == ""

    def test_first_match_wins(self):
        assert get_string_between("[one][two]", "[", "]") == "one"
        assert get_string_between("x<<a>>b>>", "<<", ">>") == "a"

    def test_start_from(self):
        assert get_string_between("[one][two]", "[", "]", 1) == "two"

    def test_start_from_past_markers(self):
        assert get_string_between("[one]xyz", "[", "]", 5) == ""

    def test_start_from_beyond_end(self):
        assert get_string_between("[a]", "[", "]", 100) == ""

    def test_negative_start_from_raises(self):
        """A negative start_from does not search from the end of the string"""
        with pytest.raises(ValidationError) as exc_info:
            get_string_between("[a][b]", "[", "]", -3)
        assert exc_info.value.code == "START_FROM"

    def test_multichar_markers(self):
        html = "<title>Начало</title>"
        assert get_string_between(html, "<title>", "</title>") == "Начало"

    def test_adjacent_markers(self):
        assert get_string_between("a[]c", "[", "]") == ""


class TestCapitalizeFirstLetter:

    def test_empty_and_none(self):
        assert capitalize_first_letter("") == ""
        assert capitalize_first_letter(None) is None

    def test_capitalizes_first_only(self):
        assert capitalize_first_letter("hello") == "Hello"
        assert capitalize_first_letter("hELLO") == "HELLO"

    def test_cyrillic(self):
        assert capitalize_first_letter("щастие") == "Щастие"

    def test_non_letter_first(self):
        assert capitalize_first_letter("1abc") == "1abc"

    def test_keeps_length_when_upper_case_expands(self):
        """The sharp s stays as-is since its upper case "SS" is two characters"""
        assert capitalize_first_letter("ßtraße") == "ßtraße"
        assert capitalize_first_letter("ǆa") == "Ǆa"


class TestGetFirstCharacters:

    def test_shorter_than_count(self):
        assert get_first_characters("ab", 10) == "ab"

    def test_truncates(self):
        assert get_first_characters("abcdef", 3) == "abc"

    def test_zero(self):
        assert get_first_characters("abc", 0) == ""

    def test_negative_count_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            get_first_characters("abc", -1)
        assert exc_info.value.code == "COUNT"


class TestGetFileExtension:

    def test_last_segment(self):
        assert get_file_extension("archive.tar.gz") == "gz"

    def test_no_extension(self):
        assert get_file_extension("noext") == ""
        assert get_file_extension("trailing.") == ""

    def test_lowercased_and_trimmed(self):
        assert get_file_extension("Report.PDF ") == "pdf"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank(self, value):
        assert get_file_extension(value) == ""

    def test_dotfile(self):
        assert get_file_extension(".bashrc") == "bashrc"
