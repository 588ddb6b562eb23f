"""Validate product payloads and listing parameters.

Each validator returns a list of :class:`FieldError`; an empty list means the
input is acceptable. ``ensure_*`` wrappers raise :class:`ValidationError` so
callers can stop before touching the database.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from producthub.core.errors import FieldError, ValidationError
from producthub.db.models.product import (
    DESCRIPTION_MAX_LENGTH,
    INTEGER_MAX,
    NAME_MAX_LENGTH,
    PRICE_PRECISION,
    PRICE_SCALE,
)
from producthub.services.query_params import ProductQueryParameters

REQUIRED_FIELDS = ["name", "description", "price", "stock"]

# Numeric(18, 2) leaves 16 digits before the decimal point
PRICE_LIMIT = Decimal(10) ** (PRICE_PRECISION - PRICE_SCALE)


def _check_text(field: str, value: Any, max_length: int) -> list[FieldError]:
    if value is None or not isinstance(value, str) or not value.strip():
        return [FieldError(field, f"{field.capitalize()} is required")]
    if len(value.strip()) > max_length:
        return [
            FieldError(
                field,
                f"{field.capitalize()} must be at most {max_length} characters",
            )
        ]
    return []


def validate_product_fields(
    name: Any, description: Any, price: Any, stock: Any
) -> list[FieldError]:
    """Check the editable product fields against the catalog constraints."""
    errors = _check_text("name", name, NAME_MAX_LENGTH)
    errors += _check_text("description", description, DESCRIPTION_MAX_LENGTH)

    if price is None:
        errors.append(FieldError("price", "Price is required"))
    elif not isinstance(price, (int, Decimal)) or isinstance(price, bool):
        errors.append(FieldError("price", "Price must be a number"))
    elif not Decimal(price).is_finite():
        errors.append(FieldError("price", "Price must be a finite number"))
    elif price < 0:
        errors.append(FieldError("price", "Price cannot be negative"))
    elif price >= PRICE_LIMIT or round(Decimal(price), PRICE_SCALE) >= PRICE_LIMIT:
        errors.append(FieldError("price", f"Price must be less than {PRICE_LIMIT:f}"))

    if stock is None:
        errors.append(FieldError("stock", "Stock is required"))
    elif not isinstance(stock, int) or isinstance(stock, bool):
        errors.append(FieldError("stock", "Stock must be a whole number"))
    elif stock < 0:
        errors.append(FieldError("stock", "Stock cannot be negative"))
    elif stock > INTEGER_MAX:
        errors.append(FieldError("stock", f"Stock cannot exceed {INTEGER_MAX}"))

    return errors


def validate_query_parameters(params: ProductQueryParameters) -> list[FieldError]:
    """Report the listing inputs that normalization could not repair."""
    errors: list[FieldError] = []
    if params.page_number < 1:
        errors.append(FieldError("pageNumber", "Page number must be greater than 0"))
    elif params.page_number > INTEGER_MAX:
        errors.append(FieldError("pageNumber", f"Page number cannot exceed {INTEGER_MAX}"))
    if params.page_size < 1:
        errors.append(FieldError("pageSize", "Page size must be between 1 and 50"))
    if params.min_price is not None and params.min_price < 0:
        errors.append(FieldError("minPrice", "Minimum price cannot be negative"))
    if params.max_price is not None and params.max_price < 0:
        errors.append(FieldError("maxPrice", "Maximum price cannot be negative"))
    if (
        params.min_price is not None
        and params.max_price is not None
        and params.min_price > params.max_price
    ):
        errors.append(
            FieldError("minPrice", "Minimum price cannot be greater than maximum price")
        )
    return errors


def ensure_valid_product(name: Any, description: Any, price: Any, stock: Any) -> None:
    errors = validate_product_fields(name, description, price, stock)
    if errors:
        raise ValidationError(errors, "Invalid product data")


def ensure_valid_query(params: ProductQueryParameters) -> None:
    errors = validate_query_parameters(params)
    if errors:
        raise ValidationError(errors, "Invalid query parameters")
