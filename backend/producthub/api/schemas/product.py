"""Pydantic models describing Product payloads."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from producthub.services.product_service import ProductPayload


class CamelModel(BaseModel):
    """Serialize with camelCase keys, accept camelCase or snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductBase(CamelModel):
    # Range and length rules live in producthub.utils.validators
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    stock: int | None = None
    is_active: bool = True

    def to_payload(self) -> ProductPayload:
        return ProductPayload(
            name=self.name,
            description=self.description,
            price=self.price,
            stock=self.stock,
            is_active=self.is_active,
        )


class ProductCreate(ProductBase):
    """Schema for UI-created product rows."""


class ProductUpdate(ProductBase):
    """Full replacement of the editable fields; ``id`` must match the path if given."""

    id: UUID | None = None


class ProductRead(CamelModel):
    id: str
    name: str
    description: str
    price: Decimal
    stock: int
    create_time: datetime
    update_time: datetime
    is_active: bool

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    @field_serializer("price")
    def serialize_price(self, value: Decimal) -> float:
        """Render prices as JSON numbers rather than strings."""
        return float(value)


class PagedProductResponse(CamelModel):
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous: bool
    has_next: bool
    items: list[ProductRead] = Field(default_factory=list)

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class ProductListQuery(BaseModel):
    """Raw listing inputs, parsed from the query string before normalization."""

    page_number: int | None = None
    page_size: int | None = None
    search_term: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    is_active: bool | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
