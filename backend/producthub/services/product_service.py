"""Business rules for catalog products.

The service validates inputs, owns timestamps and existence checks, and
delegates persistence to :class:`ProductRepository`. Lookups that miss raise
:class:`NotFoundError`; the repository itself only reports ``None``/``False``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from producthub.core.errors import NotFoundError
from producthub.db.models.product import Product
from producthub.db.repositories.product import ProductRepository
from producthub.services.pagination import PagedResult
from producthub.services.query_params import ProductQueryParameters
from producthub.utils.validators import ensure_valid_product, ensure_valid_query

logger = logging.getLogger(__name__)

TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the stored columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class ProductPayload:
    """Editable product fields as submitted by a client."""

    name: str
    description: str
    price: Decimal
    stock: int
    is_active: bool = True


class ProductService:
    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    def get_all(self) -> list[Product]:
        return self.repository.get_all()

    def get_paged(self, params: ProductQueryParameters) -> PagedResult[Product]:
        ensure_valid_query(params)
        return self.repository.get_paged(params)

    def get_by_id(self, product_id: str) -> Product:
        product = self.repository.get_by_id(product_id)
        if product is None:
            logger.warning(f"Product {product_id} not found")
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product

    def exists(self, product_id: str) -> bool:
        return self.repository.exists(product_id)

    def create(self, payload: ProductPayload) -> Product:
        """Persist a new product with fresh id and matching timestamps."""
        ensure_valid_product(
            payload.name, payload.description, payload.price, payload.stock
        )
        now = utcnow()
        product = Product(
            name=payload.name.strip(),
            description=payload.description.strip(),
            price=payload.price,
            stock=payload.stock,
            is_active=payload.is_active,
            create_time=now,
            update_time=now,
        )
        product = self.repository.add(product)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update(self, product_id: str, payload: ProductPayload) -> Product:
        """Replace the editable fields of an existing product.

        ``id`` and ``create_time`` are preserved. ``update_time`` always moves
        forward, even when the clock has not ticked since the last write.
        """
        ensure_valid_product(
            payload.name, payload.description, payload.price, payload.stock
        )
        product = self.get_by_id(product_id)

        now = utcnow()
        if now <= product.update_time:
            now = product.update_time + TIMESTAMP_RESOLUTION

        product.name = payload.name.strip()
        product.description = payload.description.strip()
        product.price = payload.price
        product.stock = payload.stock
        product.is_active = payload.is_active
        product.update_time = now

        product = self.repository.update(product)
        logger.info(f"Updated product {product_id}")
        return product

    def delete(self, product_id: str) -> None:
        """Hard delete; the row is gone afterwards."""
        if not self.repository.delete(product_id):
            logger.warning(f"Delete requested for missing product {product_id}")
            raise NotFoundError(f"Product with ID {product_id} not found")
        logger.info(f"Deleted product {product_id}")
