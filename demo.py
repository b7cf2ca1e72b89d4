#!/usr/bin/env python
from rich import print

from storeapi.settings import STORE_API_URL
from storeclient.client import StoreAPIError, StoreClient


def main():
    # expects a freshly started, seeded server
    c = StoreClient(base_url=STORE_API_URL)

    print("\nListing products...")
    print(c.list_products())

    print("\nProduct 1:")
    print(c.get_product(1))

    # -----------------------------
    # Two adds for the same product merge into one line
    # -----------------------------
    print("\nAdding 2 + 3 of product 1 to customer 1's cart...")
    c.add_to_cart(1, 1, 2)
    c.add_to_cart(1, 1, 3)
    print(c.view_cart(1))

    print("\nChecking out customer 1...")
    print(c.checkout(1))
    print("Product 1 after checkout:", c.get_product(1))

    # -----------------------------
    # Not enough stock: nothing changes, cart is kept
    # -----------------------------
    print("\nCustomer 2 asks for 5 of product 3 (stock 2)...")
    c.add_to_cart(2, 3, 5)
    try:
        c.checkout(2)
    except StoreAPIError as e:
        print(f"[red]Checkout refused:[/red] {e.error}")
    print("Product 3:", c.get_product(3))
    print("Customer 2 cart:", c.view_cart(2))


if __name__ == "__main__":
    main()
