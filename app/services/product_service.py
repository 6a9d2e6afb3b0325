from typing import List, Optional
from uuid import UUID, uuid4
import logging

from app.models.product import Product
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductCreate, ProductResponse
from app.services.result import UpdateResult


class ProductService:
    """
    Service class for Product CRUD operations.

    This service handles:
    - Creating new products
    - Reading products
    - Replacing product details
    - Deleting products
    - Mapping entities to ProductResponse DTOs
    """

    def __init__(self, repository: ProductRepository, logger: logging.Logger = None):
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    def get(self, product_id: UUID) -> Optional[ProductResponse]:
        """
        Get a product by ID.

        Args:
            product_id: Product ID to look up

        Returns:
            Product DTO or None if not found
        """
        product = self.repository.get_by_id(product_id)
        if not product:
            return None
        return ProductResponse.model_validate(product)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[ProductResponse]:
        """Get all products, optionally windowed by skip/limit."""
        products = self.repository.get_all(skip=skip, limit=limit)
        return [ProductResponse.model_validate(p) for p in products]

    def create(self, product_data: ProductCreate) -> ProductResponse:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product DTO
        """
        product = Product(
            id=uuid4(),
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock_quantity=product_data.stock_quantity,
            category_id=product_data.category_id,
        )
        product = self.repository.create(product)

        self.logger.info(f"Created product {product.id} in category {product.category_id}")
        return ProductResponse.model_validate(product)

    def update(self, product_id: UUID, product_data: ProductCreate) -> UpdateResult[ProductResponse]:
        """
        Replace all mutable fields of an existing product.

        Args:
            product_id: ID of product to update
            product_data: New values for every mutable field

        Returns:
            UpdateResult with the updated DTO, or NOT_FOUND
        """
        product = self.repository.get_by_id(product_id)
        if not product:
            return UpdateResult.not_found()

        product.name = product_data.name
        product.description = product_data.description
        product.price = product_data.price
        product.stock_quantity = product_data.stock_quantity
        product.category_id = product_data.category_id

        product = self.repository.update(product)

        self.logger.info(f"Updated product {product_id}")
        return UpdateResult.success(ProductResponse.model_validate(product))

    def delete(self, product_id: UUID) -> bool:
        """
        Delete a product.

        Returns:
            True if deleted, False if not found
        """
        return self.repository.delete(product_id)
