import uuid

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship

from app.database import Base


class Category(Base):
    """
    Category grouping products in the catalogue.

    Attributes:
        id: Unique identifier, generated by the service
        name: Category name
        description: Optional free-text description
        created_at: Timestamp when the category was created
        updated_at: Timestamp of the last update, null until the first one
    """
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    # Deleting a category must not touch its products; the database
    # rejects the delete through the RESTRICT foreign key instead
    products = relationship("Product", back_populates="category", passive_deletes="all")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
