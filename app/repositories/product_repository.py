from app.models.product import Product
from app.repositories.base import SQLAlchemyRepository


class ProductRepository(SQLAlchemyRepository[Product]):
    """Persistence gateway for products."""

    model = Product
