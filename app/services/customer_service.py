from typing import List, Optional
import logging

from app.models.customer import Customer
from app.repositories.customer_repository import CustomerRepository
from app.schemas.customer import CustomerCreate, CustomerResponse
from app.services.result import UpdateResult


class CustomerService:
    """
    Service class for Customer operations.

    Owns the email uniqueness rule: a customer can't be created with, or
    switched to, an email address another customer already uses. A clash is
    reported as an absent result (create) or a REJECTED update, never as an
    exception.
    """

    def __init__(self, repository: CustomerRepository, logger: logging.Logger = None):
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    def get(self, customer_id: int) -> Optional[CustomerResponse]:
        customer = self.repository.get_by_id(customer_id)
        if not customer:
            self.logger.warning(f"Customer not found with ID: {customer_id}")
            return None
        return CustomerResponse.model_validate(customer)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[CustomerResponse]:
        self.logger.info("Retrieving all customers")
        customers = self.repository.get_all(skip=skip, limit=limit)
        return [CustomerResponse.model_validate(c) for c in customers]

    def create(self, customer_data: CustomerCreate) -> Optional[CustomerResponse]:
        """
        Create a new customer.

        Args:
            customer_data: Customer creation data

        Returns:
            Created customer DTO, or None if the email is already registered
        """
        if self.repository.get_by_email(customer_data.email):
            self.logger.warning(f"Customer with email {customer_data.email} already exists")
            return None

        customer = Customer(**customer_data.model_dump())
        customer = self.repository.create(customer)

        self.logger.info(f"Created customer {customer.id} with email {customer.email}")
        return CustomerResponse.model_validate(customer)

    def update(self, customer_id: int, customer_data: CustomerCreate) -> UpdateResult[CustomerResponse]:
        """
        Replace all mutable fields of an existing customer.

        Args:
            customer_id: ID of customer to update
            customer_data: New values for every mutable field

        Returns:
            UpdateResult: SUCCESS with the DTO, NOT_FOUND, or REJECTED when
            the new email belongs to another customer
        """
        customer = self.repository.get_by_id(customer_id)
        if not customer:
            self.logger.warning(f"Customer not found with ID: {customer_id}")
            return UpdateResult.not_found()

        if customer_data.email != customer.email:
            owner = self.repository.get_by_email(customer_data.email)
            if owner is not None and owner.id != customer_id:
                self.logger.warning(f"Email {customer_data.email} is already in use")
                return UpdateResult.rejected(
                    f"Customer with email {customer_data.email} already exists"
                )

        for field, value in customer_data.model_dump().items():
            setattr(customer, field, value)

        customer = self.repository.update(customer)

        self.logger.info(f"Updated customer with ID: {customer_id}")
        return UpdateResult.success(CustomerResponse.model_validate(customer))

    def delete(self, customer_id: int) -> bool:
        self.logger.info(f"Deleting customer with ID: {customer_id}")
        return self.repository.delete(customer_id)
