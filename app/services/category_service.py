from typing import List, Optional
from uuid import UUID, uuid4
import logging

from app.models.category import Category
from app.repositories.category_repository import CategoryRepository
from app.schemas.category import CategoryCreate, CategoryResponse
from app.services.result import UpdateResult


class CategoryService:
    """Service class for Category CRUD operations."""

    def __init__(self, repository: CategoryRepository, logger: logging.Logger = None):
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    def get(self, category_id: UUID) -> Optional[CategoryResponse]:
        """Get a category by ID, None if it doesn't exist."""
        category = self.repository.get_by_id(category_id)
        if not category:
            return None
        return CategoryResponse.model_validate(category)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[CategoryResponse]:
        categories = self.repository.get_all(skip=skip, limit=limit)
        return [CategoryResponse.model_validate(c) for c in categories]

    def create(self, category_data: CategoryCreate) -> CategoryResponse:
        category = Category(
            id=uuid4(),
            name=category_data.name,
            description=category_data.description,
        )
        category = self.repository.create(category)

        self.logger.info(f"Created category {category.id}")
        return CategoryResponse.model_validate(category)

    def update(self, category_id: UUID, category_data: CategoryCreate) -> UpdateResult[CategoryResponse]:
        """
        Replace name and description of an existing category.

        Returns:
            UpdateResult with the updated DTO, or NOT_FOUND
        """
        category = self.repository.get_by_id(category_id)
        if not category:
            return UpdateResult.not_found()

        category.name = category_data.name
        category.description = category_data.description

        category = self.repository.update(category)

        self.logger.info(f"Updated category {category_id}")
        return UpdateResult.success(CategoryResponse.model_validate(category))

    def delete(self, category_id: UUID) -> bool:
        """
        Delete a category.

        The database rejects the delete while products still reference the
        category; that IntegrityError propagates to the caller.
        """
        return self.repository.delete(category_id)
