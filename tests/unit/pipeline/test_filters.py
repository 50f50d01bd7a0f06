"""Tests for case-insensitive substring filtering."""

from types import SimpleNamespace

import pytest

from dynamic_datatable.pipeline.filters import active_filters, apply_filters
from dynamic_datatable.schema import FilterField
from tests.fixtures.products import PRODUCT_FILTER_FIELDS, make_products


def _names(records):
    return [r["name"] for r in records]


def test_no_filters_returns_all_records_in_order():
    products = make_products()
    result = apply_filters(products, {}, PRODUCT_FILTER_FIELDS)
    assert result == products
    assert result is not products


def test_filter_is_case_insensitive_substring():
    result = apply_filters(make_products(), {"name": "LAP"}, PRODUCT_FILTER_FIELDS)
    assert _names(result) == ["Laptop"]


def test_filters_on_distinct_fields_are_combined_with_and():
    products = make_products()
    result = apply_filters(
        products, {"name": "o", "category": "elec"}, PRODUCT_FILTER_FIELDS
    )
    assert _names(result) == ["Laptop", "Smartphone"]


def test_sequential_filtering_equals_simultaneous_filtering():
    products = make_products()
    first = apply_filters(products, {"name": "o"}, PRODUCT_FILTER_FIELDS)
    sequential = apply_filters(first, {"category": "a"}, PRODUCT_FILTER_FIELDS)
    simultaneous = apply_filters(
        products, {"name": "o", "category": "a"}, PRODUCT_FILTER_FIELDS
    )
    assert sequential == simultaneous


def test_number_filter_uses_substring_on_stringified_value():
    fields = [FilterField(key="stock", label="Stock", type="number")]
    result = apply_filters(make_products(), {"stock": "0"}, fields)
    # 50, 100, 200 and 30 contain a zero; 75 does not
    assert [r["stock"] for r in result] == [50, 100, 200, 30]


def test_select_filter_uses_substring_not_exact_match():
    result = apply_filters(make_products(), {"category": "ear"}, PRODUCT_FILTER_FIELDS)
    assert _names(result) == ["Fitness Tracker"]


@pytest.mark.parametrize("filters", [{"name": ""}, {"name": None}, {}])
def test_empty_or_absent_values_are_inactive(filters):
    assert len(apply_filters(make_products(), filters, PRODUCT_FILTER_FIELDS)) == 5


def test_keys_without_filter_field_are_ignored():
    result = apply_filters(make_products(), {"stock": "zzz"}, PRODUCT_FILTER_FIELDS)
    assert len(result) == 5


def test_missing_field_is_treated_as_empty_string():
    records = [{"id": 1, "name": "Laptop"}, {"id": 2}]
    fields = [FilterField(key="name", label="Name")]
    assert apply_filters(records, {"name": "lap"}, fields) == [{"id": 1, "name": "Laptop"}]


def test_attribute_records_are_supported():
    records = [
        SimpleNamespace(id=1, name="Laptop"),
        SimpleNamespace(id=2, name="Tablet"),
    ]
    fields = [FilterField(key="name", label="Name")]
    result = apply_filters(records, {"name": "tab"}, fields)
    assert [r.id for r in result] == [2]


def test_active_filters_lists_lowercased_needles_in_field_order():
    filters = {"price": "99", "name": "LaP", "category": ""}
    assert active_filters(filters, PRODUCT_FILTER_FIELDS) == [
        ("name", "lap"),
        ("price", "99"),
    ]
