# storeapi/errors.py
"""Store errors.

Core objects raise these; the HTTP layer turns them into
``{"ok": false, "error": ...}`` responses using ``status_code``.
"""


class StoreError(Exception):
    status_code = 400


class ProductNotFound(StoreError):
    status_code = 404

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"product not found: {product_id}")


class InsufficientStock(StoreError):
    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"insufficient stock for: {product_name}")


class OutOfStock(StoreError):
    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"product out of stock: {product_name}")


class EmptyCart(StoreError):
    def __init__(self):
        super().__init__("cart empty")


class InvalidParameter(StoreError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid parameter: {name}")


class MalformedPayload(StoreError):
    def __init__(self):
        super().__init__("malformed JSON")
