from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class Product:
    product_id: str
    name: str
    description: str
    category: str  # plan / device / addon
    plan_type: str  # prepaid / postpaid
    price: float


@dataclass
class CartItem:
    item_id: str
    product_id: str
    product_name: str
    quantity: int
    plan_type: str
    unit_price: float
    total_price: float


@dataclass
class Cart:
    cart_id: str
    customer_id: str
    created_at: datetime
    items: List[CartItem] = field(default_factory=list)
    total: float = 0

    @property
    def plan_type(self) -> str | None:
        # empty cart accepts either plan type
        return self.items[0].plan_type if self.items else None

    def find_item(self, item_id: str) -> CartItem | None:
        for it in self.items:
            if it.item_id == item_id:
                return it
        return None

    def find_product(self, product_id: str) -> CartItem | None:
        for it in self.items:
            if it.product_id == product_id:
                return it
        return None
