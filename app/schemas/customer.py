import re
from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_EMAIL_LENGTH = 255

# Optional leading +, optional parentheses around the area code,
# optional separators between digit groups
PHONE_NUMBER_PATTERN = re.compile(r"^\+?\(?[0-9]{3}\)?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}$")


class CustomerBase(BaseModel):
    """Base customer schema with common fields."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., description="Email address, stored exactly as given")
    phone_number: Optional[str] = Field(None, max_length=20)


class CustomerCreate(CustomerBase):
    """Schema for creating a customer, also used as the full-replace update body."""

    @field_validator("first_name", "last_name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required and must not exceed 100 characters")
        return value

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, value: str) -> str:
        if len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email must not exceed {MAX_EMAIL_LENGTH} characters")
        # Syntax check only; the normalized form is discarded
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Email address is invalid: {e}")
        return value

    @field_validator("phone_number", mode="before")
    @classmethod
    def empty_phone_number_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not PHONE_NUMBER_PATTERN.match(value):
            raise ValueError("Phone number format is invalid")
        return value


class CustomerResponse(CustomerBase):
    """Schema for customer responses."""
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
