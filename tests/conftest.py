# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.database import ProductStore, seed_products
from product_api.main import create_app

API_KEY = "test-key"
HEADERS = {"x-api-key": API_KEY}


def make_app(store=None):
    if store is None:
        store = ProductStore(seed_products())
    return create_app(Settings(api_key=API_KEY), store=store)


@pytest.fixture
def store():
    return ProductStore(seed_products())


@pytest.fixture
def client(store):
    return TestClient(make_app(store))
