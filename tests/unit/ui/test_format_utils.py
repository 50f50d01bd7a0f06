"""Unit tests for dynamic_datatable.ui.format_utils helper functions."""

from decimal import Decimal

import pytest


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Laptop", "Laptop"),
        (50, "50"),
        (4.0, "4"),
        (4.5, "4.5"),
        (True, "true"),
        (False, "false"),
        (None, ""),
        (Decimal("1.50"), "1.50"),
    ],
)
def test_plain_text(value, expected):
    from dynamic_datatable.ui import format_utils

    assert format_utils.plain_text(value) == expected


def test_plain_text_placeholder_only_applies_to_none():
    from dynamic_datatable.ui import format_utils

    assert format_utils.plain_text(None, "—") == "—"
    assert format_utils.plain_text("", "—") == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        (999.99, "$999.99"),
        (699.99, "$699.99"),
        (1234.5, "$1,234.50"),
        (1234567.891, "$1,234,567.89"),
        (0, "$0.00"),
        (-5, "-$5.00"),
        ("79.99", "$79.99"),
        (Decimal("2.005"), "$2.01"),
        (10**27, "$1,000,000,000,000,000,000,000,000,000.00"),
        (1e30, "$1,000,000,000,000,000,000,000,000,000,000.00"),
        (Decimal("-12345678901234567890123456789.125"), "-$12,345,678,901,234,567,890,123,456,789.13"),
    ],
)
def test_format_money(value, expected):
    from dynamic_datatable.ui import format_utils

    assert format_utils.format_money(value) == expected


@pytest.mark.parametrize("value, expected", [("n/a", "n/a"), (None, ""), (float("inf"), "inf")])
def test_format_money_falls_back_to_plain_text(value, expected):
    from dynamic_datatable.ui import format_utils

    assert format_utils.format_money(value) == expected


def test_format_money_custom_symbol():
    from dynamic_datatable.ui import format_utils

    assert format_utils.format_money(10, symbol="€") == "€10.00"


def test_page_summary():
    from dynamic_datatable.ui import format_utils

    assert format_utils.page_summary(11, 20, 42) == "Showing 11 to 20 of 42 entries"


def test_plain_text_is_shared_with_schema():
    from dynamic_datatable import schema
    from dynamic_datatable.ui import format_utils

    assert format_utils.plain_text is schema.plain_text
