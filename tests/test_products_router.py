from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_get_product_use_case, get_list_products_use_case
from app.application.use_cases.get_product import GetProductUseCase
from app.application.use_cases.list_products import ListProductsUseCase
from app.main import app
from app.domain.entities.product import Product

from tests.fakes import FakeCatalogPort, make_product


@pytest.fixture
def client():
    catalog = FakeCatalogPort(
        [
            make_product(product_id="pro"),
            Product(
                id="audit",
                name="Audit",
                description="Website audit",
                price=197,
                price_id="price_audit",
                category="audit",
                features=("SEO", "UX"),
                delivery_time="24 hours",
                badge="QUICK WINS",
            ),
        ]
    )
    app.dependency_overrides[get_list_products_use_case] = lambda: ListProductsUseCase(
        catalog_port=catalog
    )
    app.dependency_overrides[get_get_product_use_case] = lambda: GetProductUseCase(
        catalog_port=catalog
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_list_products_filters_by_category(client):
    response = client.get("/api/products", params={"category": "audit"})

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": "audit",
            "name": "Audit",
            "description": "Website audit",
            "price": 197,
            "category": "audit",
            "features": ["SEO", "UX"],
            "deliveryTime": "24 hours",
            "badge": "QUICK WINS",
        }
    ]


def test_list_products_without_filter_returns_all(client):
    response = client.get("/api/products")

    assert [row["id"] for row in response.json()] == ["pro", "audit"]


def test_get_product_does_not_expose_price_reference(client):
    response = client.get("/api/products/pro")

    assert response.status_code == 200
    assert "priceId" not in response.json()
    assert "price_id" not in response.json()


def test_get_unknown_product_is_not_found(client):
    response = client.get("/api/products/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}
