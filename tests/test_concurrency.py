# tests/test_concurrency.py
import asyncio
import httpx

from conftest import HEADERS, make_app
from product_api.database import ProductStore


async def _create_task(client, i):
    return await client.post("/products", json={"name": f"p{i}", "price": i}, headers=HEADERS)


async def _create_many(app, n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*[_create_task(ac, i) for i in range(n)])


def test_concurrent_creates_get_unique_ids():
    store = ProductStore()
    app = make_app(store)

    results = asyncio.run(_create_many(app, 25))
    assert all(r.status_code == 201 for r in results)
    ids = {r.json()["id"] for r in results}
    assert len(ids) == 25
    assert store.count() == 25


async def _delete_twice(app, pid):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(
            ac.delete(f"/products/{pid}", headers=HEADERS),
            ac.delete(f"/products/{pid}", headers=HEADERS),
        )


def test_concurrent_deletes_remove_once():
    app = make_app()
    results = asyncio.run(_delete_twice(app, "1"))
    statuses = sorted(r.status_code for r in results)
    assert statuses == [204, 404]
