from typing import Annotated, List, Optional

from fastapi import APIRouter, Path, Query, Request, Response, status

from app.dependencies import CustomerServiceDep
from app.exceptions import BusinessRuleError, EntityNotFoundError
from app.schemas.customer import CustomerCreate, CustomerResponse
from app.services.result import UpdateStatus

router = APIRouter(prefix="/customers", tags=["Customers"])

# Customer ids are 32-bit autoincrement integers
MAX_CUSTOMER_ID = 2_147_483_647

CustomerId = Annotated[int, Path(ge=1, le=MAX_CUSTOMER_ID)]


@router.get(
    "",
    response_model=List[CustomerResponse],
    summary="List all customers"
)
def list_customers(
    service: CustomerServiceDep,
    skip: int = Query(0, ge=0, description="Number of customers to skip"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of customers"),
):
    return service.get_all(skip=skip, limit=limit)


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Get customer by ID"
)
def get_customer(customer_id: CustomerId, service: CustomerServiceDep):
    customer = service.get(customer_id)

    if not customer:
        raise EntityNotFoundError("Customer", customer_id)

    return customer


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new customer",
    description="Create a customer. Fails with 400 when the email is already registered."
)
def create_customer(
    customer_data: CustomerCreate,
    request: Request,
    response: Response,
    service: CustomerServiceDep,
):
    """
    Create a new customer.

    - **first_name**, **last_name**: Up to 100 characters (required)
    - **email**: Valid, unique email address (required)
    - **phone_number**: Phone number such as `(555) 123-4567` (optional)
    """
    customer = service.create(customer_data)

    if customer is None:
        raise BusinessRuleError(f"Customer with email {customer_data.email} already exists")

    response.headers["Location"] = str(request.url_for("get_customer", customer_id=str(customer.id)))
    return customer


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Update a customer",
    description="Replace every field of a customer. Fails with 400 when the new email is taken."
)
def update_customer(
    customer_id: CustomerId,
    customer_data: CustomerCreate,
    service: CustomerServiceDep,
):
    result = service.update(customer_id, customer_data)

    if result.status is UpdateStatus.NOT_FOUND:
        raise EntityNotFoundError("Customer", customer_id)
    if result.status is UpdateStatus.REJECTED:
        raise BusinessRuleError(result.reason)

    return result.value


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a customer"
)
def delete_customer(customer_id: CustomerId, service: CustomerServiceDep):
    deleted = service.delete(customer_id)

    if not deleted:
        raise EntityNotFoundError("Customer", customer_id)

    return None
