from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from telecom_cart.constants import CATEGORIES, PLAN_TYPES, SEED_PRODUCTS
from telecom_cart.db.models import Cart, Product


def _product_from_row(row: Dict[str, Any]) -> Product:
    if row["category"] not in CATEGORIES:
        raise ValueError(f"unknown category {row['category']!r} for {row['product_id']}")
    if row["plan_type"] not in PLAN_TYPES:
        raise ValueError(f"unknown plan type {row['plan_type']!r} for {row['product_id']}")
    if row["price"] < 0:
        raise ValueError(f"price must be >= 0 for {row['product_id']}")
    return Product(
        product_id=row["product_id"],
        name=row["name"],
        description=row["description"],
        category=row["category"],
        plan_type=row["plan_type"],
        price=float(row["price"]),
    )


class Catalog:
    """Read-only product listing keyed by product id."""

    def __init__(self, rows: Iterable[Dict[str, Any]] = SEED_PRODUCTS) -> None:
        # dicts keep insertion order, which is the listing order
        self._products: Dict[str, Product] = {}
        for row in rows:
            product = _product_from_row(row)
            if product.product_id in self._products:
                raise ValueError(f"duplicate product id {product.product_id}")
            self._products[product.product_id] = product

    def lookup(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def list_all(self) -> List[Product]:
        return list(self._products.values())

    def __len__(self) -> int:
        return len(self._products)


class CartStore:
    def __init__(self) -> None:
        self._carts: Dict[str, Cart] = {}

    def insert(self, cart: Cart) -> None:
        if cart.cart_id in self._carts:
            raise KeyError(f"cart {cart.cart_id} already stored")
        self._carts[cart.cart_id] = cart

    def get(self, cart_id: str) -> Optional[Cart]:
        return self._carts.get(cart_id)

    def __len__(self) -> int:
        return len(self._carts)
