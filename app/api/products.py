from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, Request, Response, status

from app.dependencies import ProductServiceDep
from app.exceptions import EntityNotFoundError
from app.schemas.product import ProductCreate, ProductResponse
from app.services.result import UpdateStatus

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List all products",
    description="Get every product. `skip` and `limit` optionally window the result."
)
def list_products(
    service: ProductServiceDep,
    skip: int = Query(0, ge=0, description="Number of products to skip"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of products"),
):
    """Get all products."""
    return service.get_all(skip=skip, limit=limit)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
    description="Get detailed information about a specific product."
)
def get_product(product_id: UUID, service: ProductServiceDep):
    """Get a product by ID."""
    product = service.get(product_id)

    if not product:
        raise EntityNotFoundError("Product", product_id)

    return product


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product in an existing category."
)
def create_product(
    product_data: ProductCreate,
    request: Request,
    response: Response,
    service: ProductServiceDep,
):
    """
    Create a new product.

    - **name**: Product name, 3 to 100 characters (required)
    - **description**: Up to 500 characters (optional)
    - **price**: Non-negative, at most two decimal places (required)
    - **stock_quantity**: Non-negative integer (required)
    - **category_id**: ID of an existing category (required)
    """
    product = service.create(product_data)
    response.headers["Location"] = str(request.url_for("get_product", product_id=str(product.id)))
    return product


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    description="Replace every field of a product. Partial updates are not supported."
)
def update_product(
    product_id: UUID,
    product_data: ProductCreate,
    service: ProductServiceDep,
):
    """Update a product."""
    result = service.update(product_id, product_data)

    if result.status is UpdateStatus.NOT_FOUND:
        raise EntityNotFoundError("Product", product_id)

    return result.value


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    description="Delete a product by ID."
)
def delete_product(product_id: UUID, service: ProductServiceDep):
    """Delete a product."""
    deleted = service.delete(product_id)

    if not deleted:
        raise EntityNotFoundError("Product", product_id)

    return None
