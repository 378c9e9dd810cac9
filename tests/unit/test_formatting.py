"""Tests for the payload formatter used in UnwrapError messages."""

from __future__ import annotations

from decimal import Decimal

import pytest

from twotrack._formatting import format_value


class Opaque:
    pass


class TestScalars:
    def test_string_is_double_quoted(self):
        assert format_value("boom") == '"boom"'

    def test_empty_string(self):
        assert format_value("") == '""'

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (42, "42"),
            (1.5, "1.5"),
            (Decimal("2.50"), "2.50"),
            (True, "True"),
            (False, "False"),
            (None, "None"),
        ],
    )
    def test_natural_text_form(self, value, expected):
        assert format_value(value) == expected


class TestStructured:
    def test_mapping_is_pretty_printed(self):
        assert format_value({"a": 1}) == '{\n  "a": 1\n}'

    def test_list(self):
        assert format_value([1, "x"]) == '[\n  1,\n  "x"\n]'

    def test_empty_containers(self):
        assert format_value({}) == "{}"
        assert format_value([]) == "[]"


class TestFallback:
    def test_unserializable_object(self):
        assert format_value(Opaque()) == "<Opaque object>"

    def test_exception_payload(self):
        assert format_value(ValueError("bad")) == "<ValueError object>"

    def test_cyclic_structure(self):
        cyclic: list = []
        cyclic.append(cyclic)
        assert format_value(cyclic) == "<list object>"

    def test_nested_unserializable_value(self):
        assert format_value({"when": Opaque()}) == "<dict object>"


class TestConfiguredFormatting:
    def test_indent_from_environment(self, monkeypatch):
        monkeypatch.setenv("TWOTRACK_FORMATTER__INDENT", "4")
        assert format_value({"a": 1}) == '{\n    "a": 1\n}'

    def test_sort_keys_from_environment(self, monkeypatch):
        monkeypatch.setenv("TWOTRACK_FORMATTER__INDENT", "0")
        monkeypatch.setenv("TWOTRACK_FORMATTER__SORT_KEYS", "true")
        assert format_value({"b": 2, "a": 1}) == '{\n"a": 1,\n"b": 2\n}'

    def test_unsortable_keys_fall_back(self, monkeypatch):
        monkeypatch.setenv("TWOTRACK_FORMATTER__SORT_KEYS", "true")
        assert format_value({1: "x", "a": "y"}) == "<dict object>"

    def test_invalid_environment_falls_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("TWOTRACK_FORMATTER__INDENT", "99")
        assert format_value({"a": 1}) == '{\n  "a": 1\n}'

    def test_unrelated_invalid_setting_does_not_break_rendering(self, monkeypatch):
        monkeypatch.setenv("TWOTRACK_LOG_LEVEL", "verbose")
        assert format_value({"a": 1}) == '{\n  "a": 1\n}'
