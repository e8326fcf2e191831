"""
Product endpoints.

These routes provide listing with filters and sorting plus create,
update and delete operations for warehouse products.  Handlers are
plain functions so that FastAPI runs the blocking MongoDB calls in its
thread pool.  Domain errors raised by ``ProductService`` are mapped to
HTTP status codes here.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from warehouse_api.app.api.deps import get_product_service
from warehouse_api.app.core.exceptions import ProductError
from warehouse_api.app.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductFilter,
    ProductRead,
    ProductUpdate,
)
from warehouse_api.app.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=List[ProductRead])
def list_products(
    name: Optional[str] = Query(None, description="Case-insensitive part of the product name"),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    min_quantity: Optional[int] = Query(None, alias="minQuantity"),
    max_quantity: Optional[int] = Query(None, alias="maxQuantity"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    """List products with optional filters.

    - **name**: substring of the name, case-insensitive.
    - **minPrice**, **maxPrice**: inclusive price range.
    - **minQuantity**, **maxQuantity**: inclusive quantity range.
    - **sortBy**: field to sort ascending by; defaults to ``name``.
    """
    filters = ProductFilter(
        name=name,
        min_price=min_price,
        max_price=max_price,
        min_quantity=min_quantity,
        max_quantity=max_quantity,
    )
    return service.list_products(filters, sort_by)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product: Optional[ProductCreate] = Body(None),
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Create a new product.  The id is assigned by the server."""
    if product is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No input data provided.")
    try:
        return MessageResponse(message=service.add_product(product))
    except ProductError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.put("/{product_id}", response_model=MessageResponse)
def update_product(
    product_id: int,
    updates: Optional[ProductUpdate] = Body(None),
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Update an existing product.

    Partial updates are supported; omitted, empty or zero fields keep
    their stored values.
    """
    try:
        return MessageResponse(message=service.update_product(product_id, updates or ProductUpdate()))
    except ProductError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Delete a product.  Products with zero quantity cannot be deleted."""
    try:
        return MessageResponse(message=service.delete_product(product_id))
    except ProductError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
