"""HTTP tests for the /products endpoints."""

import json

from fastapi.testclient import TestClient


def create(client: TestClient, payload: dict) -> dict:
    response = client.post("/products", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


class TestCreateProduct:
    def test_create_returns_stored_product(self, client, widget_payload):
        body = create(client, widget_payload)

        assert body["id"] == 1
        assert body["name"] == "Widget"
        assert body["price"] == 9.99
        assert body["inventoryStatus"] == "INSTOCK"
        assert body["category"] == "CLOTHING"
        assert body["image"] is None
        assert body["rating"] is None

    def test_client_supplied_id_is_ignored(self, client, widget_payload):
        create(client, widget_payload)

        body = create(client, {**widget_payload, "id": 50})

        assert body["id"] == 2

    def test_missing_fields(self, client):
        response = client.post("/products", json={"name": "Widget"})

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert "timestamp" in body
        assert body["errors"]["code"] == "Product code is required"
        assert body["errors"]["inventoryStatus"] == "Inventory Status is required"
        assert "name" not in body["errors"]

    def test_zero_price(self, client, widget_payload):
        response = client.post("/products", json={**widget_payload, "price": 0})

        assert response.status_code == 400
        assert response.json()["errors"] == {"price": "Price must be greater than 0"}

    def test_wrong_type(self, client, widget_payload):
        response = client.post("/products", json={**widget_payload, "price": "abc"})

        assert response.status_code == 400
        assert "price" in response.json()["errors"]

    def test_unknown_category(self, client, widget_payload):
        response = client.post(
            "/products", json={**widget_payload, "category": "BOGUS"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Invalid category: BOGUS. "
            "Valid categories are: [ACCESSORIES, FITNESS, CLOTHING, ELECTRONICS]"
        )

    def test_unknown_inventory_status(self, client, widget_payload):
        response = client.post(
            "/products", json={**widget_payload, "inventoryStatus": "GONE"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Invalid inventory status: GONE. "
            "Valid statuses are: [INSTOCK, LOWSTOCK, OUTOFSTOCK]"
        )

    def test_rejected_create_stores_nothing(self, client, widget_payload):
        client.post("/products", json={**widget_payload, "price": -1})

        assert client.get("/products").json() == []


class TestReadProducts:
    def test_list_empty(self, client):
        response = client.get("/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_every_product(self, client, widget_payload):
        for code in ("A1", "B2", "C3"):
            create(client, {**widget_payload, "code": code})

        body = client.get("/products").json()

        assert sorted(p["code"] for p in body) == ["A1", "B2", "C3"]

    def test_get_by_id(self, client, widget_payload):
        created = create(client, widget_payload)

        response = client.get(f"/products/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing(self, client):
        response = client.get("/products/999")

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["message"] == "Product not found with id 999"


class TestPatchProduct:
    def test_patch_keeps_unsupplied_fields(self, client, widget_payload):
        create(client, widget_payload)

        response = client.patch("/products/1", json={"quantity": 3})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert body["quantity"] == 3
        assert body["price"] == 9.99
        assert body["name"] == "Widget"
        assert client.get("/products/1").json() == body

    def test_patch_cannot_change_id(self, client, widget_payload):
        create(client, widget_payload)

        body = client.patch("/products/1", json={"id": 42, "name": "New"}).json()

        assert body["id"] == 1
        assert body["name"] == "New"
        assert client.get("/products/42").status_code == 404

    def test_null_fields_are_not_applied(self, client, widget_payload):
        create(client, {**widget_payload, "image": "https://img/1.png"})

        body = client.patch("/products/1", json={"image": None}).json()

        assert body["image"] == "https://img/1.png"

    def test_empty_patch(self, client, widget_payload):
        created = create(client, widget_payload)

        response = client.patch("/products/1", json={})

        assert response.status_code == 200
        assert response.json() == created

    def test_patch_enum_field(self, client, widget_payload):
        create(client, widget_payload)

        body = client.patch(
            "/products/1", json={"inventoryStatus": "OUTOFSTOCK"}
        ).json()

        assert body["inventoryStatus"] == "OUTOFSTOCK"

    def test_invalid_patch(self, client, widget_payload):
        create(client, widget_payload)

        response = client.patch("/products/1", json={"price": -1, "rating": 6})

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "price": "Price must be greater than 0",
            "rating": "Rating must be between 0 and 5",
        }
        assert client.get("/products/1").json()["price"] == 9.99

    def test_patch_missing(self, client):
        response = client.patch("/products/7", json={"quantity": 1})

        assert response.status_code == 404
        assert response.json()["message"] == "Product not found with id 7"


class TestDeleteProduct:
    def test_delete(self, client, widget_payload):
        create(client, widget_payload)

        response = client.delete("/products/1")

        assert response.status_code == 200
        assert response.content == b""
        assert client.get("/products/1").status_code == 404

    def test_delete_twice(self, client, widget_payload):
        create(client, widget_payload)

        assert client.delete("/products/1").status_code == 200
        assert client.delete("/products/1").status_code == 404


def test_collection_routes_accept_trailing_slash(client, widget_payload):
    response = client.post("/products/", json=widget_payload, follow_redirects=False)

    assert response.status_code == 200
    assert len(client.get("/products/", follow_redirects=False).json()) == 1


class TestNumericInput:
    def test_infinite_price_is_rejected_on_create(self, client, widget_payload):
        body = json.dumps({**widget_payload, "price": float("inf")})

        response = client.post(
            "/products", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert "price" in response.json()["errors"]
        assert client.get("/products").json() == []

    def test_infinite_price_is_rejected_on_patch(self, client, widget_payload):
        create(client, widget_payload)

        response = client.patch(
            "/products/1",
            content='{"price": Infinity}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "price" in response.json()["errors"]
        assert client.get("/products/1").json()["price"] == 9.99

    def test_nan_rating_is_rejected(self, client, widget_payload):
        create(client, widget_payload)

        response = client.patch(
            "/products/1",
            content='{"rating": NaN}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "rating" in response.json()["errors"]

    def test_booleans_are_not_numbers(self, client, widget_payload):
        response = client.post(
            "/products", json={**widget_payload, "price": True, "quantity": True}
        )

        assert response.status_code == 400
        assert {"price", "quantity"} <= set(response.json()["errors"])

    def test_integer_price_is_accepted(self, client, widget_payload):
        body = create(client, {**widget_payload, "price": 10})

        assert body["price"] == 10

    def test_malformed_json(self, client):
        response = client.post(
            "/products",
            content='{"name": "Widget",',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Malformed JSON request body"
        assert "errors" not in body


def test_disjoint_patches_compose(client, widget_payload):
    create(client, widget_payload)

    client.patch("/products/1", json={"quantity": 3})
    body = client.patch("/products/1", json={"name": "Gadget"}).json()

    assert body["quantity"] == 3
    assert body["name"] == "Gadget"
    assert body["price"] == 9.99
    assert client.get("/products/1").json() == body
