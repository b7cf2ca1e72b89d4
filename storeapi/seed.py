# storeapi/seed.py
from .database import Store
from .models import Product

DEMO_PRODUCTS = [
    Product(id=1, name="Teclado Mecânico", description="Teclado retroiluminado", price=299.90, stock=10),
    Product(id=2, name="Mouse Gamer", description="Mouse com alta precisão", price=149.50, stock=5),
    Product(id=3, name="Monitor 24-inch", description="Full HD 75Hz", price=899.00, stock=2),
]


def seed_catalog(store: Store) -> None:
    for p in DEMO_PRODUCTS:
        store.add_product(p)
