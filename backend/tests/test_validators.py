from decimal import Decimal

import pytest

from producthub.core.errors import ValidationError
from producthub.utils.validators import ensure_valid_product, validate_product_fields


def test_valid_product_has_no_errors():
    assert validate_product_fields("iPhone 15 Pro", "Phone", Decimal("35900"), 100) == []


def test_zero_price_and_stock_are_allowed():
    assert validate_product_fields("Freebie", "Costs nothing", Decimal("0"), 0) == []


def test_missing_fields_are_all_reported():
    errors = validate_product_fields(None, None, None, None)
    assert [e.field for e in errors] == ["name", "description", "price", "stock"]


def test_blank_strings_count_as_missing():
    errors = validate_product_fields("   ", "", Decimal("1"), 1)
    assert {e.field for e in errors} == {"name", "description"}


def test_length_limits():
    assert validate_product_fields("n" * 100, "d" * 500, Decimal("1"), 1) == []
    errors = validate_product_fields("n" * 101, "d" * 501, Decimal("1"), 1)
    assert {e.field for e in errors} == {"name", "description"}
    assert "100" in errors[0].message


def test_negative_numbers_are_rejected():
    errors = validate_product_fields("Widget", "Thing", Decimal("-0.01"), -1)
    assert {e.field: e.message for e in errors} == {
        "price": "Price cannot be negative",
        "stock": "Stock cannot be negative",
    }


def test_ensure_valid_product_raises_with_field_errors():
    with pytest.raises(ValidationError) as exc_info:
        ensure_valid_product("", "desc", Decimal("1"), 1)
    assert exc_info.value.status_code == 400
    assert exc_info.value.errors[0].field == "name"


def test_stock_above_integer_range_is_rejected():
    assert validate_product_fields("Widget", "Thing", Decimal("1"), 2**31 - 1) == []
    errors = validate_product_fields("Widget", "Thing", Decimal("1"), 2**64)
    assert [e.field for e in errors] == ["stock"]


def test_price_beyond_sixteen_integer_digits_is_rejected():
    assert validate_product_fields("Widget", "Thing", Decimal("9999999999999999.99"), 1) == []
    for price in (Decimal("10000000000000000"), Decimal("9999999999999999.999"), Decimal("1e30")):
        errors = validate_product_fields("Widget", "Thing", price, 1)
        assert [e.field for e in errors] == ["price"], price
