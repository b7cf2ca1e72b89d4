# tests/test_client.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from storeapi.database import SessionManager, Store
from storeapi.main import create_app
from storeapi.seed import seed_catalog
from storeclient.client import StoreAPIError, StoreClient


def make_client():
    store = Store()
    seed_catalog(store)
    app = create_app(store, SessionManager())
    return StoreClient(base_url="http://testserver", session=TestClient(app)), app


def test_client_walkthrough():
    c, _ = make_client()
    assert len(c.list_products()) == 3
    assert c.get_product(1)["stock"] == 10

    assert c.add_to_cart(1, 1, 2) == {"ok": True}
    c.add_to_cart(1, 1, 3)
    assert c.view_cart(1)["items"][0]["qty"] == 5

    order = c.checkout(1)
    assert order["total"] == pytest.approx(1499.50)
    assert c.get_product(1)["stock"] == 5


def test_client_raises_store_api_error():
    c, _ = make_client()
    with pytest.raises(StoreAPIError) as exc:
        c.get_product(99)
    assert exc.value.status_code == 404
    assert exc.value.error == "product not found: 99"

    with pytest.raises(StoreAPIError) as exc:
        c.checkout(1)
    assert exc.value.status_code == 400
    assert exc.value.error == "cart empty"


def test_checkout_async():
    c, app = make_client()
    c.add_to_cart(5, 2, 1)

    async def go():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
            return await c.checkout_async(5, client=ac)

    order = asyncio.run(go())
    assert order["id"] == 1
    assert order["total"] == pytest.approx(149.50)
