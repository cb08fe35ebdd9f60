"""
Live tests against the real store API (https://fakestoreapi.com by default).

These need network access and depend on a third-party service, so they are
marked `slow` and excluded from the default run. Run them manually:

    uv run pytest tests/evals/ -v -m slow
"""

import pytest
from fastapi.testclient import TestClient

from models import Product
from storefront.app import create_app
from storefront.config import CatalogSettings

# ---------------------------------------------------------------------------
# Session fixture: one app (and one upstream cache) for the whole module
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def client():
    app = create_app(CatalogSettings.from_env())
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture(scope="module")
def live_products(client: TestClient) -> list[Product]:
    response = client.get("/api/products", params={"limit": 100})
    assert response.status_code == 200, response.text
    return [Product.model_validate(item) for item in response.json()["items"]]


# ---------------------------------------------------------------------------
# Done gate 1: the upstream catalog validates against the product contract
# ---------------------------------------------------------------------------


@pytest.mark.slow
def test_live_catalog_validates(live_products: list[Product]) -> None:
    assert live_products, "Store API returned no products"
    for product in live_products:
        assert product.title
        assert product.price >= 0
        assert 0 <= product.rating.rate <= 5


# ---------------------------------------------------------------------------
# Done gate 2: the home page lists every product
# ---------------------------------------------------------------------------


@pytest.mark.slow
def test_home_page_lists_every_product(client: TestClient, live_products: list[Product]) -> None:
    response = client.get("/")

    assert response.status_code == 200
    total = len(live_products)
    assert f"Showing {total} of {total} products" in response.text
    assert response.text.count('data-testid="product-card"') == total


# ---------------------------------------------------------------------------
# Done gate 3: price filtering only shows products inside the range
# ---------------------------------------------------------------------------


@pytest.mark.slow
def test_price_filter_on_live_data(client: TestClient, live_products: list[Product]) -> None:
    response = client.get("/", params={"minPrice": "10", "maxPrice": "50"})

    assert response.status_code == 200
    expected = [p for p in live_products if 10 <= p.price <= 50]
    assert f"Showing {len(expected)} of {len(live_products)} products" in response.text
    assert "(filtered by price: $10.00 - $50.00)" in response.text


# ---------------------------------------------------------------------------
# Done gate 4: detail page for a known product, 404 for an unknown one
# ---------------------------------------------------------------------------


@pytest.mark.slow
def test_detail_page_for_first_product(client: TestClient, live_products: list[Product]) -> None:
    first = live_products[0]

    response = client.get(f"/products/{first.id}")

    assert response.status_code == 200
    assert 'data-testid="product-title"' in response.text
    assert f"#{first.id}" in response.text


@pytest.mark.slow
def test_unknown_product_is_not_found(client: TestClient) -> None:
    response = client.get("/products/999999")

    assert response.status_code == 404
    assert "The product you are looking for does not exist." in response.text
