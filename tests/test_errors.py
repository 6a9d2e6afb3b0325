"""Tests for error responses."""
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.main import app


def test_unexpected_error_is_opaque(client):
    """Unhandled failures return 500 without leaking internals."""
    with patch(
        "app.services.category_service.CategoryService.get_all",
        side_effect=RuntimeError("connection to db-primary:5432 refused"),
    ):
        with TestClient(app, raise_server_exceptions=False) as unsafe_client:
            response = unsafe_client.get("/api/categories")

    assert response.status_code == 500
    assert response.json() == {"message": "An unexpected error occurred"}


def test_validation_error_body(client):
    response = client.post("/api/categories", json={"name": ""})

    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Validation failed"
    assert data["details"][0]["field"] == "name"


def test_malformed_json_is_validation_error(client):
    response = client.post(
        "/api/customers",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_not_found_body(client):
    response = client.get("/api/customers/123")

    assert response.status_code == 404
    assert response.json() == {"message": "Customer with ID 123 not found"}
