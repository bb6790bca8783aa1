from typing import Iterable

from telecom_cart.db.models import CartItem


def line_total(unit_price: float, quantity: int) -> float:
    return unit_price * quantity


def reprice(items: Iterable[CartItem]) -> float:
    """Recompute every item's total_price and return the cart total."""
    total = 0
    for it in items:
        it.total_price = line_total(it.unit_price, it.quantity)
        total += it.total_price
    return total
