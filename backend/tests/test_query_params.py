from decimal import Decimal

import pytest

from producthub.core.errors import ValidationError
from producthub.services.pagination import PagedResult
from producthub.services.query_params import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    normalize_query_parameters,
)
from producthub.utils.validators import ensure_valid_query, validate_query_parameters


def test_defaults_when_nothing_supplied():
    params = normalize_query_parameters()
    assert params.page_number == 1
    assert params.page_size == DEFAULT_PAGE_SIZE
    assert params.search_term == ""
    assert params.sort_by == "name"
    assert params.sort_order == "asc"
    assert params.is_active is None
    assert params.min_price is None and params.max_price is None


def test_page_size_above_maximum_is_clamped():
    params = normalize_query_parameters(page_size=500)
    assert params.page_size == MAX_PAGE_SIZE
    assert validate_query_parameters(params) == []


def test_search_term_is_trimmed():
    assert normalize_query_parameters(search_term="  phone \t").search_term == "phone"
    assert normalize_query_parameters(search_term="   ").search_term == ""


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("price", "price"),
        ("Price", "price"),
        ("STOCK", "stock"),
        ("createTime", "createTime"),
        ("CreateTime", "createTime"),
        ("update_time", "updateTime"),
        ("color", "name"),
        ("", "name"),
        (None, "name"),
    ],
)
def test_sort_field_normalization(raw, expected):
    assert normalize_query_parameters(sort_by=raw).sort_by == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("desc", "desc"), ("DESC", "desc"), ("asc", "asc"), ("sideways", "asc"), (None, "asc")],
)
def test_sort_order_normalization(raw, expected):
    assert normalize_query_parameters(sort_order=raw).sort_order == expected


def test_offset_follows_page_number_and_size():
    params = normalize_query_parameters(page_number=3, page_size=20)
    assert params.offset == 40


def test_min_price_above_max_price_is_rejected():
    params = normalize_query_parameters(min_price=Decimal("100"), max_price=Decimal("10"))
    errors = validate_query_parameters(params)
    assert [e.field for e in errors] == ["minPrice"]
    with pytest.raises(ValidationError):
        ensure_valid_query(params)


def test_equal_price_bounds_are_allowed():
    params = normalize_query_parameters(min_price=Decimal("10"), max_price=Decimal("10"))
    assert validate_query_parameters(params) == []


def test_unrepairable_values_are_reported():
    params = normalize_query_parameters(
        page_number=0, page_size=0, min_price=Decimal("-1"), max_price=Decimal("-2")
    )
    fields = {e.field for e in validate_query_parameters(params)}
    assert {"pageNumber", "pageSize", "minPrice", "maxPrice"} <= fields


def test_paged_result_metadata():
    page = PagedResult.build(["a", "b"], total_count=21, page_number=1, page_size=10)
    assert page.total_pages == 3
    assert page.has_previous is False
    assert page.has_next is True

    last = PagedResult.build(["u"], total_count=21, page_number=3, page_size=10)
    assert last.has_previous is True
    assert last.has_next is False


def test_paged_result_for_empty_set():
    page = PagedResult.build([], total_count=0, page_number=1, page_size=10)
    assert page.total_pages == 0
    assert page.has_next is False
    assert page.items == []


def test_unknown_sort_field_falls_back_to_name_ascending():
    params = normalize_query_parameters(sort_by="color", sort_order="desc")
    assert params.sort_by == "name"
    assert params.sort_order == "asc"


def test_missing_sort_field_keeps_requested_order():
    params = normalize_query_parameters(sort_order="desc")
    assert params.sort_by == "name"
    assert params.sort_order == "desc"


def test_page_number_beyond_integer_range_is_rejected():
    params = normalize_query_parameters(page_number=2**31)
    assert [e.field for e in validate_query_parameters(params)] == ["pageNumber"]
    assert validate_query_parameters(normalize_query_parameters(page_number=2**31 - 1)) == []


def test_huge_page_size_is_clamped_not_rejected():
    params = normalize_query_parameters(page_size=10**20)
    assert params.page_size == MAX_PAGE_SIZE
    assert validate_query_parameters(params) == []
