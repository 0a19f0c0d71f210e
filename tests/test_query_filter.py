"""Tests for list filtering and projection."""

import pytest

from service_catalog_api.app.services.query_filter import (
    FieldKind,
    coerce_to_string,
    field_kind,
    filter_records,
    parse_fields,
)


@pytest.fixture
def records():
    return [
        {"id": "1", "name": "Alpha", "isBundle": True, "lifecycleStatus": "active", "priority": 2},
        {"id": "2", "name": "beta", "isBundle": False, "lifecycleStatus": "retired", "priority": 2.5},
        {"id": "3", "name": "Gamma", "isBundle": True, "lifecycleStatus": "Active"},
    ]


def ids(results):
    return [record["id"] for record in results]


class TestFieldKind:
    def test_declared_fields(self):
        assert field_kind("isBundle", "not a bool") is FieldKind.BOOLEAN
        assert field_kind("name", 7) is FieldKind.STRING
        assert field_kind("@type", None) is FieldKind.STRING

    def test_undeclared_fields_use_runtime_type(self):
        assert field_kind("flag", True) is FieldKind.BOOLEAN
        assert field_kind("note", "x") is FieldKind.STRING
        assert field_kind("priority", 3) is FieldKind.OTHER


class TestFilters:
    def test_boolean_true(self, records):
        assert ids(filter_records(records, {"isBundle": "true"})) == ["1", "3"]

    def test_boolean_false(self, records):
        assert ids(filter_records(records, {"isBundle": "false"})) == ["2"]

    def test_boolean_other_text_means_false(self, records):
        assert ids(filter_records(records, {"isBundle": "TRUE"})) == ["2"]

    def test_string_is_case_insensitive(self, records):
        assert ids(filter_records(records, {"name": "BETA"})) == ["2"]
        assert ids(filter_records(records, {"lifecycleStatus": "active"})) == ["1", "3"]

    def test_other_types_compare_as_strings(self, records):
        assert ids(filter_records(records, {"priority": "2"})) == ["1"]
        assert ids(filter_records(records, {"priority": "2.5"})) == ["2"]

    def test_unknown_key_matches_nothing(self, records):
        assert filter_records(records, {"colour": "red"}) == []

    def test_filters_combine(self, records):
        assert ids(filter_records(records, {"isBundle": "true", "name": "gamma"})) == ["3"]

    def test_no_filters_keeps_order(self, records):
        assert ids(filter_records(records, {})) == ["1", "2", "3"]

    def test_fields_key_is_not_a_filter(self, records):
        assert len(filter_records(records, {"fields": "id"}, "id")) == 3


class TestProjection:
    def test_selects_named_fields(self, records):
        results = filter_records(records, {"isBundle": "true"}, "id,name")
        assert results == [{"id": "1", "name": "Alpha"}, {"id": "3", "name": "Gamma"}]

    def test_unknown_names_are_omitted(self, records):
        results = filter_records(records, {}, "id,priority,missing")
        assert results == [
            {"id": "1", "priority": 2},
            {"id": "2", "priority": 2.5},
            {"id": "3"},
        ]

    def test_filtering_precedes_projection(self, records):
        results = filter_records(records, {"lifecycleStatus": "retired"}, "id")
        assert results == [{"id": "2"}]

    def test_empty_selection_is_no_projection(self, records):
        assert filter_records(records, {}, "") == records

    def test_parse_fields_strips_blanks(self):
        assert parse_fields(" id, name,,") == ["id", "name"]


def test_coerce_to_string():
    assert coerce_to_string(True) == "true"
    assert coerce_to_string(3.0) == "3"
    assert coerce_to_string([1, 2]) == "[1,2]"
