"""Unit tests for option selection normalization."""

import pytest

from app.utils.selection import normalize_selection


class TestNormalizeSelection:

    def test_string_is_unchanged(self):
        assert normalize_selection("red") == "red"
        assert normalize_selection("") == ""

    def test_booleans(self):
        assert normalize_selection(True) == "true"
        assert normalize_selection(False) == "false"

    def test_integers(self):
        assert normalize_selection(3) == "3"
        assert normalize_selection(-7) == "-7"

    def test_floats(self):
        assert normalize_selection(2.5) == "2.5"
        assert normalize_selection(3.0) == "3"

    def test_list_is_compact_json(self):
        assert normalize_selection([1, "a", None]) == '[1,"a",null]'

    def test_dict_keeps_non_ascii(self):
        assert normalize_selection({"name": "café", "n": 2}) == '{"name":"café","n":2}'

    def test_none_is_empty(self):
        assert normalize_selection(None) == ""

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            normalize_selection(object())
