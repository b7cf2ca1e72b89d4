import asyncio

from storeapi.settings import STORE_API_URL
from storeclient.client import StoreAPIError, StoreClient

PRODUCT_ID = 3  # seeded with stock 2


async def simulate_purchase(client, customer_id, qty):
    try:
        client.add_to_cart(customer_id, PRODUCT_ID, qty)
        order = await client.checkout_async(customer_id)
        print(f"✅ customer {customer_id} bought {qty} units "
              f"(Order ID: {order['id']}, Total: {order['total']:.2f})")
    except StoreAPIError as e:
        print(f"❌ customer {customer_id} order failed: {e.error}")


async def main():
    c = StoreClient(base_url=STORE_API_URL)
    print(f"\n🖥️  Product before: {c.get_product(PRODUCT_ID)}")

    print("\n⚡ Simulating concurrent purchases...")
    await asyncio.gather(
        simulate_purchase(c, 10, 2),
        simulate_purchase(c, 11, 2),
    )

    print("\n📦 Final product state:", c.get_product(PRODUCT_ID))
    print("🛒 Customer 10 cart:", c.view_cart(10))
    print("🛒 Customer 11 cart:", c.view_cart(11))


if __name__ == "__main__":
    asyncio.run(main())
