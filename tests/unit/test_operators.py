"""
Unit tests for the operator catalog.
"""
import pytest
from highlighter.engine.operators import (
    ColumnFamily, COLUMN_TYPE_FAMILIES, FAMILY_OPERATORS, VALUELESS_OPERATORS,
    family_for_column_type, operators_for_column_type, get_operator,
    is_operator_allowed, operator_needs_value, get_all_operator_ids
)


def ids(specs):
    return [spec.id for spec in specs]


class TestColumnTypeFamilies:
    """Tests for column type classification."""

    @pytest.mark.parametrize("column_type", ["status", "color", "dropdown", "person", "priority"])
    def test_choice_types(self, column_type):
        assert family_for_column_type(column_type) == ColumnFamily.CHOICE

    @pytest.mark.parametrize("column_type,family", [
        ("text", ColumnFamily.TEXT),
        ("long_text", ColumnFamily.TEXT),
        ("numbers", ColumnFamily.NUMBER),
        ("rating", ColumnFamily.NUMBER),
        ("date", ColumnFamily.DATE),
        ("checkbox", ColumnFamily.CHECKBOX),
    ])
    def test_other_types(self, column_type, family):
        assert family_for_column_type(column_type) == family

    def test_unknown_type_falls_back_to_text(self):
        """Unrecognised column types use the text family."""
        assert family_for_column_type("timeline") == ColumnFamily.TEXT
        assert family_for_column_type("") == ColumnFamily.TEXT
        assert family_for_column_type(None) == ColumnFamily.TEXT

    def test_every_family_has_operators(self):
        for family in ColumnFamily:
            assert FAMILY_OPERATORS[family]

    def test_mapping_only_targets_known_families(self):
        assert set(COLUMN_TYPE_FAMILIES.values()) <= set(ColumnFamily)


class TestOperatorsForColumnType:
    """Tests for the ordered operator lists."""

    def test_text_operators(self):
        assert ids(operators_for_column_type("text")) == [
            "equals", "not_equals", "contains", "not_contains", "is_empty", "is_not_empty"
        ]

    def test_number_operators(self):
        assert ids(operators_for_column_type("numbers")) == [
            "equals", "not_equals", "greater_than", "less_than",
            "greater_or_equal", "less_or_equal", "is_empty", "is_not_empty"
        ]

    def test_choice_operators_and_labels(self):
        specs = operators_for_column_type("status")
        assert ids(specs) == ["equals", "not_equals", "is_empty", "is_not_empty"]
        assert specs[0].label == "is"
        assert specs[1].label == "is not"

    def test_date_operators(self):
        assert ids(operators_for_column_type("date")) == [
            "equals", "before", "after", "is_overdue", "is_today",
            "is_this_week", "is_empty", "is_not_empty"
        ]

    def test_checkbox_operators(self):
        assert ids(operators_for_column_type("checkbox")) == ["is_checked", "is_not_checked"]

    def test_returned_list_is_a_copy(self):
        """Callers cannot corrupt the catalog."""
        specs = operators_for_column_type("text")
        specs.clear()
        assert operators_for_column_type("text")

    def test_unknown_type_gets_text_operators(self):
        assert ids(operators_for_column_type("mirror")) == ids(operators_for_column_type("text"))


class TestOperatorLookup:
    """Tests for per-type operator lookup."""

    def test_get_operator(self):
        spec = get_operator("numbers", "greater_than")
        assert spec is not None
        assert spec.label == "is greater than"

    def test_get_operator_by_family(self):
        assert get_operator(ColumnFamily.DATE, "is_overdue") is not None

    def test_operator_outside_catalog(self):
        assert get_operator("checkbox", "equals") is None
        assert not is_operator_allowed("status", "contains")
        assert is_operator_allowed("long_text", "contains")

    def test_all_operator_ids(self):
        all_ids = get_all_operator_ids()
        assert "is_this_week" in all_ids
        assert all_ids == sorted(set(all_ids))


class TestValuelessOperators:
    """Tests for the valueless classification."""

    @pytest.mark.parametrize("operator", sorted(VALUELESS_OPERATORS))
    def test_valueless(self, operator):
        assert not operator_needs_value(operator)

    @pytest.mark.parametrize("operator", [
        "equals", "not_equals", "contains", "not_contains", "greater_than",
        "less_than", "greater_or_equal", "less_or_equal", "before", "after"
    ])
    def test_needs_value(self, operator):
        assert operator_needs_value(operator)

    def test_spec_exposes_requires_value(self):
        assert get_operator("date", "before").requires_value
        assert not get_operator("date", "is_today").requires_value
