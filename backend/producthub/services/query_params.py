"""Paging, sorting and filtering inputs for product listings.

Query parameters arrive from the HTTP layer as loose optional values. They are
normalized exactly once, here, into a :class:`ProductQueryParameters` instance
that the rest of the stack trusts: page size clamped, search term trimmed,
sort field and order defaulted. Values that cannot be repaired by clamping
(page number below 1, negative prices, inverted price range) are left as-is
and reported by :func:`producthub.utils.validators.validate_query_parameters`.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

MAX_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE_NUMBER = 1

# Lower-cased client spelling -> canonical sort key
SORT_FIELDS = {
    "name": "name",
    "price": "price",
    "stock": "stock",
    "createtime": "createTime",
    "create_time": "createTime",
    "updatetime": "updateTime",
    "update_time": "updateTime",
}
DEFAULT_SORT_FIELD = "name"

SORT_ASC = "asc"
SORT_DESC = "desc"


@dataclass(frozen=True)
class ProductFilter:
    """The fixed set of row filters a listing can apply."""

    search_term: str = ""
    is_active: bool | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None


@dataclass(frozen=True)
class ProductQueryParameters:
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    search_term: str = ""
    sort_by: str = DEFAULT_SORT_FIELD
    sort_order: str = SORT_ASC
    is_active: bool | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def descending(self) -> bool:
        return self.sort_order == SORT_DESC

    def to_filter(self) -> ProductFilter:
        return ProductFilter(
            search_term=self.search_term,
            is_active=self.is_active,
            min_price=self.min_price,
            max_price=self.max_price,
        )


def normalize_sort_field(sort_by: str | None) -> str:
    return normalize_sort(sort_by, None)[0]


def normalize_sort_order(sort_order: str | None) -> str:
    if sort_order and sort_order.strip().lower() == SORT_DESC:
        return SORT_DESC
    return SORT_ASC


def normalize_sort(sort_by: str | None, sort_order: str | None) -> tuple[str, str]:
    """Resolve the sort key and direction together.

    A missing key sorts by name in the requested order; an unrecognized key
    falls back to name ascending regardless of the requested order.
    """
    order = normalize_sort_order(sort_order)
    if not sort_by or not sort_by.strip():
        return DEFAULT_SORT_FIELD, order
    field = SORT_FIELDS.get(sort_by.strip().lower())
    if field is None:
        return DEFAULT_SORT_FIELD, SORT_ASC
    return field, order


def normalize_query_parameters(
    page_number: int | None = None,
    page_size: int | None = None,
    search_term: str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
    is_active: bool | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
) -> ProductQueryParameters:
    """Apply defaults and clamping to raw listing inputs."""
    size = DEFAULT_PAGE_SIZE if page_size is None else min(page_size, MAX_PAGE_SIZE)
    sort_field, order = normalize_sort(sort_by, sort_order)
    return ProductQueryParameters(
        page_number=DEFAULT_PAGE_NUMBER if page_number is None else page_number,
        page_size=size,
        search_term=(search_term or "").strip(),
        sort_by=sort_field,
        sort_order=order,
        is_active=is_active,
        min_price=min_price,
        max_price=max_price,
    )
