# storeclient/client.py
import requests
import httpx
from typing import Any, Optional


class StoreAPIError(Exception):
    def __init__(self, status_code: int, error: str):
        self.status_code = status_code
        self.error = error
        super().__init__(f"HTTP {status_code}: {error}")


class StoreClient:
    def __init__(self, base_url: str = "http://127.0.0.1:8080", timeout: int = 10, session: Any = None):
        self.base_url = base_url.rstrip("/")
        # anything with requests-style get/post works, e.g. a FastAPI TestClient
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _unwrap(self, r):
        if r.status_code >= 400:
            try:
                error = r.json().get("error", r.text)
            except ValueError:
                error = r.text
            raise StoreAPIError(r.status_code, error)
        return r.json()

    # Products
    def list_products(self):
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        return self._unwrap(r)

    def get_product(self, product_id: int):
        r = self.session.get(f"{self.base_url}/product", params={"id": product_id}, timeout=self.timeout)
        return self._unwrap(r)

    # Cart
    def add_to_cart(self, customer_id: int, product_id: int, qty: int = 1):
        r = self.session.post(f"{self.base_url}/cart/add", json={
            "customerId": customer_id, "productId": product_id, "qty": qty
        }, timeout=self.timeout)
        return self._unwrap(r)

    def view_cart(self, customer_id: int):
        r = self.session.get(f"{self.base_url}/cart", params={"customerId": customer_id}, timeout=self.timeout)
        return self._unwrap(r)

    # Checkout
    def checkout(self, customer_id: int):
        r = self.session.post(f"{self.base_url}/checkout", json={"customerId": customer_id}, timeout=self.timeout)
        return self._unwrap(r)

    async def checkout_async(self, customer_id: int, client: Optional[httpx.AsyncClient] = None):
        if client is not None:
            r = await client.post(f"{self.base_url}/checkout", json={"customerId": customer_id})
            return self._unwrap(r)
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            r = await ac.post(f"{self.base_url}/checkout", json={"customerId": customer_id})
            return self._unwrap(r)
