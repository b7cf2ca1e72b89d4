# storeapi/core.py
from pydantic import BaseModel, Field
from typing import Any, Dict

from .models import Product

# Missing ids default to 0 and fail the positivity checks in the service layer.


class AddToCartIn(BaseModel):
    customer_id: int = Field(0, alias="customerId")
    product_id: int = Field(0, alias="productId")
    qty: int = 1


class CheckoutIn(BaseModel):
    customer_id: int = Field(0, alias="customerId")


def _make_product_dict(p: Product) -> Dict[str, Any]:
    return {
        "id": p.id,
        "name": p.name,
        "description": p.description,
        "price": p.price,
        "stock": p.stock,
    }


def _error_body(message: str) -> Dict[str, Any]:
    return {"ok": False, "error": message}
