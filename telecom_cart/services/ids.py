from __future__ import annotations

import itertools

from telecom_cart.constants import CART_ID_PREFIX, ITEM_ID_PREFIX


class IdGenerator:
    """Counters behind cart ids (cart_1, cart_2, ...) and item ids.

    There is no reset; a generator never hands out the same id twice.
    """

    def __init__(self, start: int = 1) -> None:
        self._carts = itertools.count(start)
        self._items = itertools.count(start)

    def next_cart_id(self) -> str:
        return f"{CART_ID_PREFIX}{next(self._carts)}"

    def next_item_id(self) -> str:
        return f"{ITEM_ID_PREFIX}{next(self._items)}"
