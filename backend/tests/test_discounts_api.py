"""Tests for the discount REST endpoints and application wiring."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from discount.core.correlation import CORRELATION_HEADER
from discount.core.dependencies import build_mediator, get_mediator
from discount.main import app
from discount.repositories.discount_repository import DiscountRepository

NO_DISCOUNT = {
    "id": 0,
    "productName": "No Discount",
    "description": "No Discount Available",
    "amount": 0,
}


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


def _create(client: TestClient, product_name: str, description: str, amount: int):
    return client.post(
        "/discount",
        json={"productName": product_name, "description": description, "amount": amount},
    )


class TestGetDiscount:
    def test_missing_product_returns_no_discount(self, client):
        response = client.get("/discount/Unknown")

        assert response.status_code == 200
        assert response.json() == NO_DISCOUNT

    def test_existing_product(self, client):
        _create(client, "Widget", "10% off", 10)

        response = client.get("/discount/Widget")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] > 0
        assert data["productName"] == "Widget"
        assert data["description"] == "10% off"
        assert data["amount"] == 10

    def test_api_prefix_alias(self, client):
        _create(client, "Widget", "10% off", 10)

        response = client.get("/api/discount/Widget")
        assert response.status_code == 200
        assert response.json()["amount"] == 10


class TestCreateDiscount:
    def test_create_returns_created_with_location(self, client):
        response = _create(client, "Widget", "10% off", 10)

        assert response.status_code == 201
        assert response.headers["location"].endswith("/discount/Widget")
        data = response.json()
        assert data["productName"] == "Widget"
        assert data["description"] == "10% off"
        assert data["amount"] == 10

    def test_create_accepts_snake_case_body(self, client):
        response = client.post(
            "/discount",
            json={"product_name": "Gadget", "description": "5% off", "amount": 5},
        )

        assert response.status_code == 201
        assert client.get("/discount/Gadget").json()["amount"] == 5

    def test_create_missing_product_name(self, client):
        response = client.post("/discount", json={"description": "x", "amount": 1})

        assert response.status_code == 422

    def test_create_oversized_product_name(self, client):
        response = _create(client, "x" * 256, "too long", 1)

        assert response.status_code == 422

    def test_create_invalid_amount(self, client):
        response = client.post(
            "/discount", json={"productName": "Widget", "description": "x", "amount": "lots"}
        )

        assert response.status_code == 422
        assert client.get("/discount/Widget").json() == NO_DISCOUNT

    @pytest.mark.parametrize("amount", [2**31, -(2**31) - 1, 3_000_000_000])
    def test_create_amount_outside_int32(self, client, amount):
        response = _create(client, "Widget", "x", amount)

        assert response.status_code == 422
        assert client.get("/discount/Widget").json() == NO_DISCOUNT

    def test_create_amount_at_int32_bounds(self, client):
        assert _create(client, "Widget", "max", 2**31 - 1).status_code == 201
        assert client.get("/discount/Widget").json()["amount"] == 2**31 - 1


class TestUpdateDiscount:
    def test_update_existing(self, client):
        _create(client, "Widget", "10% off", 10)
        existing = client.get("/discount/Widget").json()

        response = client.put(
            "/discount",
            json={
                "id": existing["id"],
                "productName": "Widget",
                "description": "25% off",
                "amount": 25,
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": existing["id"],
            "productName": "Widget",
            "description": "25% off",
            "amount": 25,
        }
        assert client.get("/discount/Widget").json()["amount"] == 25

    def test_update_unknown_id(self, client):
        _create(client, "Widget", "10% off", 10)
        before = client.get("/discount/Widget").json()

        response = client.put(
            "/discount",
            json={
                "id": before["id"] + 100,
                "productName": "Widget",
                "description": "changed",
                "amount": 99,
            },
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Discount not found"
        assert client.get("/discount/Widget").json() == before

    def test_update_requires_id(self, client):
        response = client.put(
            "/discount", json={"productName": "Widget", "description": "x", "amount": 1}
        )

        assert response.status_code == 422

    @pytest.mark.parametrize(("id_", "amount"), [(2**31, 1), (1, 2**31), (1, -(2**31) - 1)])
    def test_update_fields_outside_int32(self, client, id_, amount):
        _create(client, "Widget", "10% off", 10)
        before = client.get("/discount/Widget").json()

        response = client.put(
            "/discount",
            json={"id": id_, "productName": "Widget", "description": "x", "amount": amount},
        )

        assert response.status_code == 422
        assert client.get("/discount/Widget").json() == before


class TestDeleteDiscount:
    def test_delete_existing(self, client):
        _create(client, "Widget", "10% off", 10)

        response = client.delete("/discount/Widget")

        assert response.status_code == 200
        assert response.json() is True
        assert client.get("/discount/Widget").json() == NO_DISCOUNT

    def test_delete_unknown(self, client):
        _create(client, "Widget", "10% off", 10)

        response = client.delete("/discount/Unknown")

        assert response.status_code == 200
        assert response.json() is False
        assert client.get("/discount/Widget").json()["amount"] == 10


def test_widget_lifecycle(client):
    assert _create(client, "Widget", "10% off", 10).status_code == 201

    coupon = client.get("/discount/Widget").json()
    assert coupon["productName"] == "Widget"
    assert coupon["description"] == "10% off"
    assert coupon["amount"] == 10

    assert client.delete("/discount/Widget").json() is True
    assert client.get("/discount/Widget").json() == NO_DISCOUNT


class TestStorageErrors:
    @pytest.fixture
    def broken_client(self):
        broken = build_mediator(DiscountRepository(create_engine("sqlite://")))
        app.dependency_overrides[get_mediator] = lambda: broken
        yield TestClient(app)
        app.dependency_overrides.pop(get_mediator, None)

    @pytest.mark.parametrize(
        ("method", "path", "body"),
        [
            ("GET", "/discount/Widget", None),
            ("POST", "/discount", {"productName": "Widget", "description": "", "amount": 1}),
            ("PUT", "/discount", {"id": 1, "productName": "Widget", "description": "", "amount": 1}),
            ("DELETE", "/discount/Widget", None),
        ],
    )
    def test_storage_error_is_server_error(self, broken_client, method, path, body):
        response = broken_client.request(method, path, json=body)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_create_affecting_no_row_is_server_error(self):
        repository = MagicMock(spec=DiscountRepository)
        repository.create_discount.return_value = False
        app.dependency_overrides[get_mediator] = lambda: build_mediator(repository)
        try:
            response = TestClient(app).post(
                "/discount", json={"productName": "Widget", "description": "x", "amount": 1}
            )
        finally:
            app.dependency_overrides.pop(get_mediator, None)

        assert response.status_code == 500
        assert response.json() == {"detail": "Discount could not be created"}
        repository.create_discount.assert_called_once()
        assert "location" not in response.headers


class TestApplication:
    def test_app_starts(self):
        assert isinstance(app, FastAPI)
        assert app.title == "Discount API"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "Healthy"}

    def test_root_redirects_to_docs(self, client):
        response = client.get("/", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/docs"

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/health", headers={CORRELATION_HEADER: "abc-123"})

        assert response.headers[CORRELATION_HEADER] == "abc-123"

    def test_correlation_id_is_generated(self, client):
        first = client.get("/health").headers[CORRELATION_HEADER]
        second = client.get("/health").headers[CORRELATION_HEADER]

        assert first
        assert first != second

    def test_openapi_lists_discount_routes_once(self, client):
        paths = client.get("/openapi.json").json()["paths"]

        assert set(paths) >= {"/discount", "/discount/{product_name}", "/health"}
        assert not any(path.startswith("/api/discount") for path in paths)
