from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, Request, Response, status

from app.dependencies import CategoryServiceDep
from app.exceptions import EntityNotFoundError
from app.schemas.category import CategoryCreate, CategoryResponse
from app.services.result import UpdateStatus

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=List[CategoryResponse],
    summary="List all categories"
)
def list_categories(
    service: CategoryServiceDep,
    skip: int = Query(0, ge=0, description="Number of categories to skip"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of categories"),
):
    return service.get_all(skip=skip, limit=limit)


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Get category by ID"
)
def get_category(category_id: UUID, service: CategoryServiceDep):
    category = service.get(category_id)

    if not category:
        raise EntityNotFoundError("Category", category_id)

    return category


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new category"
)
def create_category(
    category_data: CategoryCreate,
    request: Request,
    response: Response,
    service: CategoryServiceDep,
):
    category = service.create(category_data)
    response.headers["Location"] = str(request.url_for("get_category", category_id=str(category.id)))
    return category


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Update a category",
    description="Replace name and description of a category."
)
def update_category(
    category_id: UUID,
    category_data: CategoryCreate,
    service: CategoryServiceDep,
):
    result = service.update(category_id, category_data)

    if result.status is UpdateStatus.NOT_FOUND:
        raise EntityNotFoundError("Category", category_id)

    return result.value


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
    description="Delete a category by ID. Rejected with 409 while products still belong to it."
)
def delete_category(category_id: UUID, service: CategoryServiceDep):
    deleted = service.delete(category_id)

    if not deleted:
        raise EntityNotFoundError("Category", category_id)

    return None
