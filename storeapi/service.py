# storeapi/service.py
from .database import SessionManager, Store
from .errors import EmptyCart, InsufficientStock, InvalidParameter, OutOfStock, ProductNotFound
from .logging import get_logger
from .models import CartLine, CartView, Order

# Request-level logic shared by the HTTP routes, the demos and the tests.

logger = get_logger(__name__)


def add_to_cart(store: Store, sessions: SessionManager, customer_id: int,
                product_id: int, qty: int = 1) -> CartLine:
    if customer_id <= 0:
        raise InvalidParameter("customerId")
    if product_id <= 0:
        raise InvalidParameter("productId")
    if qty <= 0:
        raise InvalidParameter("qty")

    product = store.find_by_id(product_id)
    if product is None:
        raise ProductNotFound(product_id)
    if product.stock <= 0:
        raise OutOfStock(product.name)

    line = sessions.add_to_cart(customer_id, product.id, product.name, product.price, qty)
    logger.info("cart add: customer=%s product=%s qty=%s (line qty=%s)",
                customer_id, product_id, qty, line.qty)
    return line


def view_cart(sessions: SessionManager, customer_id: int) -> CartView:
    return CartView(customer_id=customer_id, items=sessions.get_cart(customer_id))


def checkout(store: Store, sessions: SessionManager, customer_id: int) -> Order:
    """Turn a customer's cart into an order.

    The order id is allocated before stock is validated, so a rejected
    checkout still consumes an id. On failure the error from
    ``Store.place_order`` propagates and the cart is left as it was; the cart
    is cleared only after the stock has been decremented.

    The cart lock and the store lock are taken one after the other, never
    together: an item added to the cart between the read and the clear is
    dropped with the cleared cart.
    """
    if customer_id <= 0:
        raise InvalidParameter("customerId")

    lines = sessions.get_cart(customer_id)
    if not lines:
        raise EmptyCart()

    order = Order(id=store.next_order_id(), items=tuple(lines))
    try:
        store.place_order(order)
    except (ProductNotFound, InsufficientStock) as e:
        logger.warning("checkout rejected: customer=%s order=%s reason=%s", customer_id, order.id, e)
        raise

    sessions.clear_cart(customer_id)
    logger.info("order placed: customer=%s order=%s total=%.2f", customer_id, order.id, order.total)
    return order
