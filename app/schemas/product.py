from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# stock_quantity is a 32-bit INTEGER column
MAX_STOCK_QUANTITY = 2_147_483_647


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    name: str = Field(..., min_length=3, max_length=100, description="Product name")
    description: Optional[str] = Field(None, max_length=500, description="Product description")
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Unit price, at most two decimal places",
    )
    stock_quantity: int = Field(
        ...,
        ge=0,
        le=MAX_STOCK_QUANTITY,
        description="Available stock (must be non-negative)",
    )
    category_id: UUID = Field(..., description="ID of the category the product belongs to")


class ProductCreate(ProductBase):
    """Schema for creating a product, also used as the full-replace update body."""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name must not be empty")
        return value


class ProductResponse(ProductBase):
    """Schema for product response including all fields."""
    id: UUID
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
