# storeapi/database.py
import threading
from collections import Counter
from typing import Dict, List, Optional

from .errors import InsufficientStock, InvalidParameter, ProductNotFound
from .logging import get_logger
from .models import CartLine, Order, Product

# This file holds the in-memory stores and their locks. Each store guards its
# own state with one lock; no operation holds both.

logger = get_logger(__name__)


class Store:
    """Catalog of products plus the order-id counter."""

    def __init__(self):
        self._products: List[Product] = []
        self._next_order_id = 1
        self._lock = threading.Lock()

    def _find(self, product_id: int) -> Optional[Product]:
        # caller holds the lock
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def add_product(self, product: Product) -> None:
        with self._lock:
            self._products.append(product.model_copy())
        logger.info("product added: id=%s name=%s stock=%s", product.id, product.name, product.stock)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._lock:
            p = self._find(product_id)
            return p.model_copy() if p else None

    def list(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def next_order_id(self) -> int:
        with self._lock:
            order_id = self._next_order_id
            self._next_order_id += 1
            return order_id

    def place_order(self, order: Order) -> None:
        """Validate stock for every line, then decrement all of them.

        Raises ProductNotFound or InsufficientStock before touching any stock,
        so a failed order leaves the catalog exactly as it was.
        """
        # lines for the same product are checked against stock together
        wanted = Counter()
        for line in order.items:
            wanted[line.product_id] += line.qty

        with self._lock:
            for product_id, qty in wanted.items():
                p = self._find(product_id)
                if p is None:
                    raise ProductNotFound(product_id)
                if p.stock < qty:
                    raise InsufficientStock(p.name)

            for product_id, qty in wanted.items():
                self._find(product_id).decrease_stock(qty)

    def restock(self, product_id: int, qty: int) -> Product:
        if qty <= 0:
            raise InvalidParameter("qty")
        with self._lock:
            p = self._find(product_id)
            if p is None:
                raise ProductNotFound(product_id)
            p.increase_stock(qty)
            snapshot = p.model_copy()
        logger.info("product restocked: id=%s stock=%s", product_id, snapshot.stock)
        return snapshot


class SessionManager:
    """Carts keyed by customer id."""

    def __init__(self):
        self._carts: Dict[int, Dict[int, CartLine]] = {}
        self._lock = threading.Lock()

    def add_to_cart(self, customer_id: int, product_id: int, product_name: str,
                    unit_price: float, qty: int) -> CartLine:
        if qty <= 0:
            raise InvalidParameter("qty")
        with self._lock:
            cart = self._carts.setdefault(customer_id, {})
            line = cart.get(product_id)
            if line is not None:
                line = line.merged(qty)
            else:
                line = CartLine(product_id=product_id, product_name=product_name,
                                unit_price=unit_price, qty=qty)
            cart[product_id] = line
            return line

    def get_cart(self, customer_id: int) -> List[CartLine]:
        with self._lock:
            return list(self._carts.get(customer_id, {}).values())

    def clear_cart(self, customer_id: int) -> None:
        with self._lock:
            self._carts.pop(customer_id, None)
