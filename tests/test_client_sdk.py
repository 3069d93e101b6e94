# tests/test_client_sdk.py
import asyncio
import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import API_KEY, make_app
from product_api.database import ProductStore
from product_sdk.client import ProductClient, ProductClientError


def make_sdk(app=None, api_key=API_KEY):
    c = ProductClient(base_url="http://testserver", api_key=api_key)
    # TestClient speaks the same get/post/put/delete interface as requests.Session
    c.session = TestClient(app or make_app())
    c.session.headers.update({"x-api-key": api_key})
    return c


def test_sdk_crud_flow():
    c = make_sdk()
    assert c.welcome().startswith("Welcome")

    created = c.create_product("Blender", 80, description="Glass jar", category="kitchen", in_stock=True)
    pid = created["id"]
    assert c.get_product(pid)["inStock"] is True

    updated = c.update_product(pid, "Blender Pro", 0, in_stock=False)
    assert updated["name"] == "Blender Pro"
    assert updated["price"] == 80
    assert updated["inStock"] is False

    assert c.stats() == {"electronics": 2, "kitchen": 2}

    c.delete_product(pid)
    with pytest.raises(ProductClientError) as exc:
        c.get_product(pid)
    assert exc.value.status_code == 404
    assert exc.value.message == "Product not found"


def test_sdk_list_and_iterate_pages():
    c = make_sdk()
    body = c.list_products(category="electronics", limit=1)
    assert body["total"] == 2
    names = [p["name"] for p in c.iter_products(limit=2)]
    assert names == ["Laptop", "Smartphone", "Coffee Maker"]


def test_sdk_surfaces_auth_and_validation_errors():
    c = make_sdk(api_key="wrong")
    with pytest.raises(ProductClientError) as exc:
        c.list_products()
    assert exc.value.status_code == 401

    c = make_sdk()
    with pytest.raises(ProductClientError) as exc:
        c.create_product("", 10)
    assert exc.value.status_code == 400
    assert exc.value.message == "Invalid or missing product name"


def test_sdk_async_create():
    store = ProductStore()
    app = make_app(store)
    c = ProductClient(base_url="http://test", api_key=API_KEY)

    async def create_all():
        transport = httpx.ASGITransport(app=app)
        return await asyncio.gather(*[
            c.create_product_async(f"p{i}", i, transport=transport) for i in range(5)
        ])

    created = asyncio.run(create_all())
    assert len({p["id"] for p in created}) == 5
    assert store.count() == 5
