from typing import Optional

from sqlalchemy import func, select

from app.models.customer import Customer
from app.repositories.base import SQLAlchemyRepository


class CustomerRepository(SQLAlchemyRepository[Customer]):
    """Persistence gateway for customers."""

    model = Customer
    stamp_updated_on_create = True

    def get_by_email(self, email: str) -> Optional[Customer]:
        """Find the customer owning an email address, ignoring case."""
        self.logger.debug(f"Looking up customer with email {email}")
        return self.db.scalars(
            select(Customer).where(func.lower(Customer.email) == email.lower())
        ).first()
