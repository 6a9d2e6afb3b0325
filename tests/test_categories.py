"""Tests for Category API endpoints."""
import uuid


def test_create_category(client):
    response = client.post(
        "/api/categories",
        json={"name": "Books", "description": "Books across various genres"}
    )

    assert response.status_code == 201
    data = response.json()
    assert uuid.UUID(data["id"])
    assert data["name"] == "Books"
    assert data["description"] == "Books across various genres"
    assert data["created_at"] is not None
    assert data["updated_at"] is None
    assert response.headers["location"].endswith(f"/api/categories/{data['id']}")


def test_create_category_name_only(client):
    response = client.post("/api/categories", json={"name": "Tools"})

    assert response.status_code == 201
    assert response.json()["description"] is None


def test_create_category_validation(client):
    """Name is required and limited to 100 characters, description to 500."""
    invalid_bodies = [
        {},
        {"name": ""},
        {"name": "  "},
        {"name": "n" * 101},
        {"name": "Tools", "description": "d" * 501},
    ]
    for body in invalid_bodies:
        response = client.post("/api/categories", json=body)
        assert response.status_code == 400, body
        assert response.json()["message"] == "Validation failed"

    assert client.get("/api/categories").json() == []


def test_get_category(client, category):
    response = client.get(f"/api/categories/{category['id']}")

    assert response.status_code == 200
    assert response.json() == category


def test_get_category_not_found(client):
    response = client.get(f"/api/categories/{uuid.uuid4()}")

    assert response.status_code == 404


def test_list_categories(client):
    for name in ["Electronics", "Books", "Garden"]:
        client.post("/api/categories", json={"name": name})

    response = client.get("/api/categories")

    assert response.status_code == 200
    assert {c["name"] for c in response.json()} == {"Electronics", "Books", "Garden"}


def test_update_category(client, category):
    response = client.put(
        f"/api/categories/{category['id']}",
        json={"name": "Power Tools"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Power Tools"
    # Full replace: omitted description is cleared
    assert data["description"] is None
    assert data["created_at"] == category["created_at"]
    assert data["updated_at"] is not None


def test_update_category_not_found(client):
    response = client.put(f"/api/categories/{uuid.uuid4()}", json={"name": "Nowhere"})

    assert response.status_code == 404
    assert "not found" in response.json()["message"]


def test_update_category_invalid(client, category):
    response = client.put(f"/api/categories/{category['id']}", json={"name": ""})

    assert response.status_code == 400


def test_delete_category(client, category):
    response = client.delete(f"/api/categories/{category['id']}")
    assert response.status_code == 204

    assert client.get(f"/api/categories/{category['id']}").status_code == 404
    assert client.delete(f"/api/categories/{category['id']}").status_code == 404


def test_delete_category_with_products_is_rejected(client, product_payload, category):
    """A category can't be removed while products still reference it."""
    product = client.post("/api/products", json=product_payload).json()

    response = client.delete(f"/api/categories/{category['id']}")

    assert response.status_code == 409
    assert "message" in response.json()
    assert client.get(f"/api/categories/{category['id']}").status_code == 200
    assert client.get(f"/api/products/{product['id']}").status_code == 200


def test_delete_category_after_products_removed(client, product_payload, category):
    product = client.post("/api/products", json=product_payload).json()
    client.delete(f"/api/products/{product['id']}")

    response = client.delete(f"/api/categories/{category['id']}")

    assert response.status_code == 204
