"""Dependencies that assemble the product service and listing parameters."""

from fastapi import Depends, Request
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from producthub.api.schemas.product import ProductListQuery
from producthub.core.errors import FieldError, ValidationError
from producthub.db.repositories.product import ProductRepository
from producthub.db.session import get_db
from producthub.services.product_service import ProductService
from producthub.services.query_params import (
    ProductQueryParameters,
    normalize_query_parameters,
)

# "PageNumber", "pageNumber" and "page_number" all map to page_number
QUERY_KEYS = {
    name.replace("_", ""): name for name in ProductListQuery.model_fields
}


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db))


def get_query_parameters(request: Request) -> ProductQueryParameters:
    """Read listing parameters case-insensitively and normalize them once."""
    raw: dict[str, str] = {}
    for key, value in request.query_params.items():
        field = QUERY_KEYS.get(key.replace("_", "").lower())
        if field is not None and value.strip() != "":
            raw[field] = value

    try:
        parsed = ProductListQuery.model_validate(raw)
    except PydanticValidationError as e:
        errors = [
            FieldError(to_camel(str(err["loc"][0])) if err["loc"] else "query", err["msg"])
            for err in e.errors()
        ]
        raise ValidationError(errors, "Invalid query parameters") from e

    return normalize_query_parameters(**parsed.model_dump())
