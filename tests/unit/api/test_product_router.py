"""Tests for the /products endpoints."""

import pytest
from fastapi.testclient import TestClient


def _create(client: TestClient, category: str = "tools", name: str = "hammer") -> dict:
    response = client.post("/products", json={"category": category, "name": name})
    assert response.status_code == 201
    return response.json()


class TestCreateProduct:
    def test_create_returns_201_with_body(self, client: TestClient):
        response = client.post("/products", json={"category": "tools", "name": "hammer"})

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["category"] == "tools"
        assert body["name"] == "hammer"

    def test_create_ignores_client_supplied_id(self, client: TestClient):
        existing = _create(client)

        response = client.post(
            "/products", json={"id": existing["id"], "category": "tools", "name": "wrench"}
        )

        assert response.status_code == 201
        assert response.json()["id"] != existing["id"]

    def test_create_trims_whitespace(self, client: TestClient):
        body = _create(client, "  tools ", " hammer ")

        assert (body["category"], body["name"]) == ("tools", "hammer")

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"category": "", "name": "hammer"}, "category"),
            ({"category": "tools", "name": "   "}, "name"),
            ({"category": "tools"}, "name"),
            ({"category": "tools", "name": "x" * 256}, "name"),
        ],
    )
    def test_create_invalid_body(self, client: TestClient, payload, field):
        response = client.post("/products", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["errorCode"] == "VALIDATION_FAILED"
        assert body["errorMessage"]
        assert field in [e["field"] for e in body["errors"]]

    def test_create_malformed_json(self, client: TestClient):
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errorCode"] == "VALIDATION_FAILED"


class TestGetProduct:
    def test_get_existing(self, client: TestClient):
        created = _create(client)

        response = client.get(f"/products/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_returns_404(self, client: TestClient):
        response = client.get("/products/42")

        assert response.status_code == 404
        assert response.json() == {
            "errorCode": "PRODUCT_NOT_FOUND",
            "errorMessage": "Product 42 does not exist.",
        }

    @pytest.mark.parametrize("product_id", [0, -3, 2**63, 2**64, -(2**64)])
    def test_get_id_that_cannot_exist_returns_404(self, client: TestClient, product_id):
        response = client.get(f"/products/{product_id}")

        assert response.status_code == 404
        assert response.json()["errorCode"] == "PRODUCT_NOT_FOUND"

    def test_get_non_integer_id(self, client: TestClient):
        response = client.get("/products/abc")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "product_id"


class TestUpdateProduct:
    def test_update_replaces_fields(self, client: TestClient):
        created = _create(client)

        response = client.put(
            f"/products/{created['id']}", json={"category": "garden", "name": "rake"}
        )

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "category": "garden", "name": "rake"}
        assert client.get(f"/products/{created['id']}").json()["name"] == "rake"

    def test_update_missing_returns_404(self, client: TestClient):
        response = client.put("/products/99", json={"category": "garden", "name": "rake"})

        assert response.status_code == 404
        assert response.json()["errorCode"] == "PRODUCT_NOT_FOUND"

    def test_update_huge_id_returns_404(self, client: TestClient):
        response = client.put(f"/products/{2**64}", json={"category": "garden", "name": "rake"})

        assert response.status_code == 404
        assert response.json()["errorCode"] == "PRODUCT_NOT_FOUND"

    def test_update_invalid_body_leaves_product(self, client: TestClient):
        created = _create(client)

        response = client.put(f"/products/{created['id']}", json={"category": "garden"})

        assert response.status_code == 400
        assert client.get(f"/products/{created['id']}").json() == created


class TestDeleteProduct:
    def test_delete_returns_204(self, client: TestClient):
        created = _create(client)

        response = client.delete(f"/products/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/products/{created['id']}").status_code == 404

    def test_delete_missing_is_idempotent(self, client: TestClient):
        assert client.delete("/products/12345").status_code == 204
        assert client.delete("/products/12345").status_code == 204

    @pytest.mark.parametrize("product_id", [0, -3, 2**64])
    def test_delete_id_that_cannot_exist_is_noop(self, client: TestClient, product_id):
        assert client.delete(f"/products/{product_id}").status_code == 204


class TestListProducts:
    @pytest.fixture
    def stocked(self, client: TestClient) -> None:
        for name in ("hammer", "wrench", "saw"):
            _create(client, "tools", name)
        _create(client, "garden", "rake")

    def test_list_uses_camel_case_keys(self, client: TestClient, stocked):
        response = client.get("/products", params={"category": "tools", "page": 0, "size": 2})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"products", "totalPages", "totalElements", "page", "size"}
        assert body["totalElements"] == 3
        assert body["totalPages"] == 2
        assert body["page"] == 0
        assert body["size"] == 2
        assert [p["name"] for p in body["products"]] == ["hammer", "wrench"]

    def test_list_second_page(self, client: TestClient, stocked):
        body = client.get("/products", params={"category": "tools", "page": 1, "size": 2}).json()

        assert [p["name"] for p in body["products"]] == ["saw"]

    def test_list_defaults(self, client: TestClient, stocked):
        body = client.get("/products", params={"category": "tools"}).json()

        assert body["page"] == 0
        assert body["size"] == 10
        assert len(body["products"]) == 3

    def test_list_unknown_category(self, client: TestClient, stocked):
        body = client.get("/products", params={"category": "kitchen"}).json()

        assert body["products"] == []
        assert body["totalElements"] == 0
        assert body["totalPages"] == 0

    @pytest.mark.parametrize(
        ("params", "field"),
        [
            ({}, "category"),
            ({"category": "   "}, "category"),
            ({"category": "tools", "page": -1}, "page"),
            ({"category": "tools", "size": 0}, "size"),
            ({"category": "tools", "size": 101}, "size"),
            ({"category": "tools", "page": 2**62, "size": 10}, "page"),
        ],
    )
    def test_list_invalid_params(self, client: TestClient, params, field):
        response = client.get("/products", params=params)

        assert response.status_code == 400
        body = response.json()
        assert body["errorCode"] == "VALIDATION_FAILED"
        assert [e["field"] for e in body["errors"]] == [field]


class TestListCategories:
    def test_categories_listed_once(self, client: TestClient):
        _create(client, "tools", "hammer")
        _create(client, "tools", "wrench")
        _create(client, "garden", "rake")

        response = client.get("/products/categories")

        assert response.status_code == 200
        assert response.json() == ["garden", "tools"]

    def test_no_categories(self, client: TestClient):
        assert client.get("/products/categories").json() == []
