from app.models.category import Category
from app.repositories.base import SQLAlchemyRepository


class CategoryRepository(SQLAlchemyRepository[Category]):
    """Persistence gateway for categories."""

    model = Category
