"""Tests for the persistence gateways against SQLite."""
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from app.exceptions import EntityNotFoundError
from app.models.category import Category
from app.models.customer import Customer
from app.models.product import Product
from app.repositories.category_repository import CategoryRepository
from app.repositories.customer_repository import CustomerRepository
from app.repositories.product_repository import ProductRepository


def make_category(name="Electronics"):
    return Category(id=uuid4(), name=name, description=f"{name} things")


def make_product(category_id, name="Laptop"):
    return Product(
        id=uuid4(),
        name=name,
        description="Portable computer",
        price=Decimal("999.99"),
        stock_quantity=10,
        category_id=category_id,
    )


def test_create_stamps_created_at(db_session):
    repository = CategoryRepository(db_session)

    category = repository.create(make_category())

    assert category.created_at is not None
    assert category.updated_at is None


def test_get_by_id(db_session):
    repository = CategoryRepository(db_session)
    created = repository.create(make_category())

    found = repository.get_by_id(created.id)

    assert found is not None
    assert found.name == "Electronics"


def test_get_by_id_missing_returns_none(db_session):
    assert ProductRepository(db_session).get_by_id(uuid4()) is None


def test_get_all(db_session):
    categories = CategoryRepository(db_session)
    products = ProductRepository(db_session)
    category = categories.create(make_category())
    for name in ["Laptop", "Phone", "Tablet"]:
        products.create(make_product(category.id, name))

    result = products.get_all()

    assert sorted(p.name for p in result) == ["Laptop", "Phone", "Tablet"]
    assert len(products.get_all(limit=2)) == 2
    assert len(products.get_all(skip=2)) == 1


def test_update_replaces_mutable_columns(db_session):
    repository = CategoryRepository(db_session)
    created = repository.create(make_category())
    created_at = created.created_at

    replacement = Category(id=created.id, name="Gadgets", description=None)
    updated = repository.update(replacement)

    assert updated.name == "Gadgets"
    assert updated.description is None
    assert updated.created_at == created_at
    assert updated.updated_at is not None


def test_update_advances_updated_at(db_session):
    repository = CategoryRepository(db_session)
    category = repository.create(make_category())

    category.name = "First"
    first = repository.update(category).updated_at
    category.name = "Second"
    second = repository.update(category).updated_at

    assert second >= first


def test_update_missing_raises_not_found(db_session):
    repository = ProductRepository(db_session)
    product = make_product(uuid4())

    with pytest.raises(EntityNotFoundError) as exc_info:
        repository.update(product)

    assert exc_info.value.entity == "Product"
    assert exc_info.value.entity_id == product.id
    assert exc_info.value.status_code == 404


def test_delete(db_session):
    repository = CategoryRepository(db_session)
    category = repository.create(make_category())

    assert repository.delete(category.id) is True
    assert repository.delete(category.id) is False
    assert repository.get_by_id(category.id) is None


def test_delete_category_with_products_raises(db_session):
    categories = CategoryRepository(db_session)
    category = categories.create(make_category())
    ProductRepository(db_session).create(make_product(category.id))

    with pytest.raises(IntegrityError):
        categories.delete(category.id)

    # The session is usable again after the rollback
    assert categories.get_by_id(category.id) is not None


def test_customer_create_stamps_both_timestamps(db_session):
    repository = CustomerRepository(db_session)

    customer = repository.create(
        Customer(first_name="Grace", last_name="Hopper", email="grace@example.com")
    )

    assert customer.id is not None
    assert customer.created_at is not None
    assert customer.updated_at == customer.created_at


def test_customer_get_by_email(db_session):
    repository = CustomerRepository(db_session)
    repository.create(Customer(first_name="Grace", last_name="Hopper", email="grace@example.com"))

    assert repository.get_by_email("grace@example.com").first_name == "Grace"
    assert repository.get_by_email("nobody@example.com") is None


def test_customer_get_by_email_ignores_case(db_session):
    repository = CustomerRepository(db_session)
    repository.create(Customer(first_name="Grace", last_name="Hopper", email="Grace@Example.com"))

    assert repository.get_by_email("grace@example.COM").first_name == "Grace"


def test_customer_email_unique_index(db_session):
    """The store enforces email uniqueness even without the service check."""
    repository = CustomerRepository(db_session)
    repository.create(Customer(first_name="Grace", last_name="Hopper", email="grace@example.com"))

    with pytest.raises(IntegrityError):
        repository.create(
            Customer(first_name="Other", last_name="Grace", email="grace@example.com")
        )

    assert len(repository.get_all()) == 1
