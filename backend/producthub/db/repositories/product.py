"""Data access for product rows, including the paged listing query."""

from __future__ import annotations

import logging

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session

from producthub.db.models.product import Product
from producthub.services.pagination import PagedResult
from producthub.services.query_params import ProductFilter, ProductQueryParameters

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"

SORT_COLUMNS = {
    "name": Product.name,
    "price": Product.price,
    "stock": Product.stock,
    "createTime": Product.create_time,
    "updateTime": Product.update_time,
}


def _like_pattern(term: str) -> str:
    """Build a LIKE pattern that matches ``term`` literally anywhere."""
    escaped = (
        term.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


def apply_product_filter(query: Select, filters: ProductFilter) -> Select:
    """Narrow a product select by search term, active flag and price range."""
    if filters.search_term:
        pattern = _like_pattern(filters.search_term)
        query = query.where(
            or_(
                func.lower(Product.name).like(pattern, escape=LIKE_ESCAPE),
                func.lower(Product.description).like(pattern, escape=LIKE_ESCAPE),
            )
        )
    if filters.is_active is not None:
        query = query.where(Product.is_active == filters.is_active)
    if filters.min_price is not None:
        query = query.where(Product.price >= filters.min_price)
    if filters.max_price is not None:
        query = query.where(Product.price <= filters.max_price)
    return query


def apply_product_sort(query: Select, sort_by: str, descending: bool) -> Select:
    """Order by the requested column; unknown keys fall back to name ascending."""
    column = SORT_COLUMNS.get(sort_by)
    if column is None:
        return query.order_by(Product.name.asc())
    return query.order_by(column.desc() if descending else column.asc())


class ProductRepository:
    """Persistence operations for :class:`Product` over one session.

    The repository flushes but never commits; the request-scoped session
    owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_all(self) -> list[Product]:
        return list(self.session.scalars(select(Product).order_by(Product.name)))

    def get_paged(self, params: ProductQueryParameters) -> PagedResult[Product]:
        """Filter, count, sort, then paginate, in that order."""
        filters = params.to_filter()

        count_query = apply_product_filter(
            select(func.count()).select_from(Product), filters
        )
        total_count = self.session.scalar(count_query) or 0

        query = apply_product_filter(select(Product), filters)
        query = apply_product_sort(query, params.sort_by, params.descending)
        query = query.offset(params.offset).limit(params.page_size)
        items = list(self.session.scalars(query))

        logger.debug(
            f"Paged query page={params.page_number} size={params.page_size} "
            f"matched={total_count} returned={len(items)}"
        )
        return PagedResult.build(
            items,
            total_count=total_count,
            page_number=params.page_number,
            page_size=params.page_size,
        )

    def get_by_id(self, product_id: str) -> Product | None:
        return self.session.get(Product, product_id)

    def add(self, product: Product) -> Product:
        self.session.add(product)
        self.session.flush()
        self.session.refresh(product)
        return product

    def update(self, product: Product) -> Product:
        self.session.flush()
        self.session.refresh(product)
        return product

    def delete(self, product_id: str) -> bool:
        """Remove the row; returns False when nothing matched."""
        product = self.session.get(Product, product_id)
        if product is None:
            return False
        self.session.delete(product)
        self.session.flush()
        return True

    def exists(self, product_id: str) -> bool:
        """True for any stored row, active or not."""
        query = select(Product.id).where(Product.id == product_id).limit(1)
        return self.session.scalar(query) is not None
