# storeapi/models.py
from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import List, Tuple


class Product(BaseModel):
    id: int
    name: str
    description: str = ""
    price: float = Field(ge=0)
    stock: int = Field(ge=0)

    def decrease_stock(self, qty: int) -> bool:
        if qty <= 0 or qty > self.stock:
            return False
        self.stock -= qty
        return True

    def increase_stock(self, qty: int) -> None:
        if qty > 0:
            self.stock += qty


class CartLine(BaseModel):
    """One product in a cart.

    Name and price are copied from the product when it is added and are not
    refreshed afterwards, so the order is charged what the customer saw.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_id: int = Field(alias="productId")
    product_name: str = Field(alias="productName")
    unit_price: float = Field(alias="unitPrice")
    qty: int

    @computed_field
    @property
    def subtotal(self) -> float:
        return self.unit_price * self.qty

    def merged(self, qty: int) -> "CartLine":
        return self.model_copy(update={"qty": self.qty + qty})


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    items: Tuple[CartLine, ...] = ()

    @computed_field
    @property
    def total(self) -> float:
        return sum((line.subtotal for line in self.items), 0.0)


class CartView(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: int = Field(alias="customerId")
    items: List[CartLine] = []

    @computed_field
    @property
    def subtotal(self) -> float:
        return sum((line.subtotal for line in self.items), 0.0)
