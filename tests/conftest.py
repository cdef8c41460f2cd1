import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_product():
    """Factory persisting a Product through the model factory."""

    def _make(category: str = "electronics", name: str = "Laptop") -> Product:
        product = Product.create(category, name)
        product.save()
        return product

    return _make
