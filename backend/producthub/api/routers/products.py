"""CRUD + paged listing endpoints for the product catalog."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError

from producthub.api.dependencies.products import (
    get_product_service,
    get_query_parameters,
)
from producthub.api.schemas.product import (
    PagedProductResponse,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from producthub.core.errors import ConflictError, StorageError
from producthub.services.product_service import ProductService
from producthub.services.query_params import ProductQueryParameters

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List all products",
    response_model=list[ProductRead],
)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductRead]:
    """Return every product, ignoring paging parameters."""
    try:
        return [ProductRead.model_validate(p) for p in service.get_all()]
    except SQLAlchemyError as e:
        logger.error(f"Database error listing products: {e}", exc_info=True)
        raise StorageError("Failed to retrieve products") from e


@router.get(
    "/paged",
    summary="List products with search, filters, sorting and pagination",
    response_model=PagedProductResponse,
)
async def list_products_paged(
    params: ProductQueryParameters = Depends(get_query_parameters),
    service: ProductService = Depends(get_product_service),
) -> PagedProductResponse:
    """Return one page of products for the admin grid.

    Accepts PageNumber, PageSize, SearchTerm, SortBy, SortOrder, IsActive,
    MinPrice and MaxPrice (camelCase and snake_case spellings also work).
    PageSize above 50 is clamped to 50.
    """
    try:
        page = service.get_paged(params)
        return PagedProductResponse.model_validate(page)
    except SQLAlchemyError as e:
        logger.error(f"Database error listing paged products: {e}", exc_info=True)
        raise StorageError("Failed to retrieve products") from e


@router.get(
    "/{product_id}",
    summary="Fetch a single product",
    response_model=ProductRead,
)
async def get_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    try:
        return ProductRead.model_validate(service.get_by_id(str(product_id)))
    except SQLAlchemyError as e:
        logger.error(f"Database error reading product {product_id}: {e}", exc_info=True)
        raise StorageError("Failed to retrieve product") from e


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
)
async def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Persist a product from the UI form; id and timestamps are assigned here."""
    try:
        product = service.create(payload.to_payload())
    except SQLAlchemyError as e:
        logger.error(f"Database error creating product: {e}", exc_info=True)
        raise StorageError("Failed to create product") from e

    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id)
    )
    return ProductRead.model_validate(product)


@router.put(
    "/{product_id}",
    summary="Update an existing product",
    response_model=ProductRead,
)
async def update_product(
    product_id: UUID,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Replace all editable fields of a product.

    A body ``id``, when present, must equal the path id.
    """
    if payload.id is not None and payload.id != product_id:
        raise ConflictError(
            f"Product ID in body ({payload.id}) does not match URL ({product_id})"
        )
    try:
        product = service.update(str(product_id), payload.to_payload())
        return ProductRead.model_validate(product)
    except SQLAlchemyError as e:
        logger.error(f"Database error updating product {product_id}: {e}", exc_info=True)
        raise StorageError("Failed to update product") from e


@router.delete(
    "/{product_id}",
    summary="Delete a product",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Remove the product row permanently."""
    try:
        service.delete(str(product_id))
    except SQLAlchemyError as e:
        logger.error(f"Database error deleting product {product_id}: {e}", exc_info=True)
        raise StorageError("Failed to delete product") from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
