# tests/test_api.py
import pytest
from fastapi.testclient import TestClient

from storeapi.database import SessionManager, Store
from storeapi.main import create_app
from storeapi.models import Product
from storeapi.seed import seed_catalog


def make_client():
    store = Store()
    seed_catalog(store)
    return TestClient(create_app(store, SessionManager())), store


def test_list_products():
    client, _ = make_client()
    r = client.get("/products")
    assert r.status_code == 200
    body = r.json()
    assert [p["id"] for p in body] == [1, 2, 3]
    assert set(body[0]) == {"id", "name", "description", "price", "stock"}


def test_get_product():
    client, _ = make_client()
    r = client.get("/product", params={"id": 2})
    assert r.status_code == 200
    assert r.json()["name"] == "Mouse Gamer"


def test_get_product_errors():
    client, _ = make_client()
    assert client.get("/product", params={"id": 99}).status_code == 404
    r = client.get("/product")
    assert r.status_code == 400
    assert r.json() == {"ok": False, "error": "invalid parameter: id"}
    assert client.get("/product", params={"id": "abc"}).status_code == 400


def test_cart_add_view_and_checkout():
    client, store = make_client()
    r = client.post("/cart/add", json={"customerId": 1, "productId": 1, "qty": 2})
    assert r.status_code == 200
    assert r.json() == {"ok": True}
    client.post("/cart/add", json={"customerId": 1, "productId": 1, "qty": 3})

    cart = client.get("/cart", params={"customerId": 1}).json()
    assert cart["customerId"] == 1
    assert len(cart["items"]) == 1
    item = cart["items"][0]
    assert item["productId"] == 1
    assert item["productName"] == "Teclado Mecânico"
    assert item["qty"] == 5
    assert item["subtotal"] == pytest.approx(1499.50)
    assert cart["subtotal"] == pytest.approx(1499.50)

    r = client.post("/checkout", json={"customerId": 1})
    assert r.status_code == 200
    order = r.json()
    assert order["id"] == 1
    assert order["total"] == pytest.approx(1499.50)
    assert order["items"][0]["qty"] == 5
    assert store.find_by_id(1).stock == 5
    assert client.get("/cart", params={"customerId": 1}).json()["items"] == []


def test_qty_defaults_to_one():
    client, _ = make_client()
    client.post("/cart/add", json={"customerId": 4, "productId": 2})
    assert client.get("/cart", params={"customerId": 4}).json()["items"][0]["qty"] == 1


def test_cart_add_errors():
    client, store = make_client()
    store.add_product(Product(id=4, name="Empty shelf", price=1.0, stock=0))

    r = client.post("/cart/add", json={"productId": 1, "qty": 1})
    assert r.status_code == 400
    assert r.json()["error"] == "invalid parameter: customerId"
    assert client.post("/cart/add", json={"customerId": 1, "productId": 1, "qty": 0}).status_code == 400
    assert client.post("/cart/add", json={"customerId": 1, "productId": 99}).status_code == 404

    r = client.post("/cart/add", json={"customerId": 1, "productId": 4})
    assert r.status_code == 400
    assert r.json()["error"] == "product out of stock: Empty shelf"


def test_malformed_json_is_400():
    client, _ = make_client()
    for path in ("/cart/add", "/checkout"):
        r = client.post(path, content="{not json", headers={"Content-Type": "application/json"})
        assert r.status_code == 400
        assert r.json() == {"ok": False, "error": "malformed JSON"}


def test_view_cart_requires_customer_id():
    client, _ = make_client()
    r = client.get("/cart")
    assert r.status_code == 400
    assert r.json()["error"] == "invalid parameter: customerId"


def test_view_cart_unknown_customer_is_empty():
    client, _ = make_client()
    r = client.get("/cart", params={"customerId": 77})
    assert r.status_code == 200
    assert r.json() == {"customerId": 77, "items": [], "subtotal": 0}


def test_checkout_errors():
    client, store = make_client()
    assert client.post("/checkout", json={"customerId": 0}).status_code == 400

    r = client.post("/checkout", json={"customerId": 1})
    assert r.status_code == 400
    assert r.json()["error"] == "cart empty"

    client.post("/cart/add", json={"customerId": 1, "productId": 3, "qty": 5})
    r = client.post("/checkout", json={"customerId": 1})
    assert r.status_code == 400
    assert r.json() == {"ok": False, "error": "insufficient stock for: Monitor 24-inch"}
    assert store.find_by_id(3).stock == 2
    assert client.get("/cart", params={"customerId": 1}).json()["items"][0]["qty"] == 5


def test_checkout_product_not_found_is_400():
    store = Store()
    sessions = SessionManager()
    sessions.add_to_cart(1, 42, "Ghost", 1.0, 1)
    client = TestClient(create_app(store, sessions))
    r = client.post("/checkout", json={"customerId": 1})
    assert r.status_code == 400
    assert r.json()["error"] == "product not found: 42"
