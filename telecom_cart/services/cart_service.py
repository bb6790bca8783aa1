from __future__ import annotations

import copy
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, NoReturn, Optional

from telecom_cart.db.memory import CartStore, Catalog
from telecom_cart.db.models import Cart, CartItem, Product
from telecom_cart.errors import CartError, ErrorCode, errmsg
from telecom_cart.services.ids import IdGenerator
from telecom_cart.services.pricing import line_total, reprice
from telecom_cart.utils.validators import is_positive_int, require_id

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CartService:
    """
    Cart operations over an in-memory store.

    Business rule: a non-empty cart holds products of a single plan type
    (prepaid or postpaid). Every call runs under one lock and returns a
    snapshot of the cart, never the stored object.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        store: Optional[CartStore] = None,
        ids: Optional[IdGenerator] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self.store = store if store is not None else CartStore()
        self.ids = ids if ids is not None else IdGenerator()
        self.clock = clock
        self._lock = threading.RLock()

    # ---------------- carts ----------------

    def create_cart(self, customer_id: str) -> Cart:
        require_id(customer_id, errmsg.CUSTOMER_ID_REQUIRED, ErrorCode.INVALID_CUSTOMER_ID)

        with self._lock:
            cart = Cart(
                cart_id=self.ids.next_cart_id(),
                customer_id=customer_id,
                created_at=self.clock(),
            )
            self.store.insert(cart)
            logger.info("cart created cart_id=%s customer_id=%s", cart.cart_id, customer_id)
            return copy.deepcopy(cart)

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Return the cart, or None when no cart has this id."""
        require_id(cart_id, errmsg.CART_ID_REQUIRED, ErrorCode.INVALID_CART_ID)

        with self._lock:
            cart = self.store.get(cart_id)
            return copy.deepcopy(cart) if cart is not None else None

    def clear_cart(self, cart_id: str) -> Cart:
        require_id(cart_id, errmsg.CART_ID_REQUIRED, ErrorCode.INVALID_CART_ID)

        with self._lock:
            cart = self._require_cart(cart_id)
            cart.items = []
            cart.total = 0
            logger.info("cart cleared cart_id=%s", cart_id)
            return copy.deepcopy(cart)

    # ---------------- items ----------------

    def add_item(self, cart_id: str, product_id: str, quantity: int = 1) -> Cart:
        """
        Add `quantity` of a catalog product to the cart.

        A product already in the cart gets its quantity increased instead of
        a second line. Quantity itself is not checked here, unlike
        update_quantity; callers are expected to send a positive integer.
        """
        require_id(cart_id, errmsg.CART_ID_REQUIRED, ErrorCode.INVALID_CART_ID)

        with self._lock:
            cart = self._require_cart(cart_id)

            product = self.catalog.lookup(product_id)
            if product is None:
                self._reject(cart_id, errmsg.PRODUCT_NOT_FOUND, ErrorCode.PRODUCT_NOT_FOUND)

            existing_type = cart.plan_type
            if existing_type is not None and existing_type != product.plan_type:
                self._reject(
                    cart_id,
                    errmsg.PLAN_TYPE_MISMATCH.format(existing=existing_type, new=product.plan_type),
                    ErrorCode.PLAN_TYPE_MISMATCH,
                )

            item = cart.find_product(product.product_id)
            if item is not None:
                item.quantity += quantity
            else:
                item = self._new_item(product, quantity)
                cart.items.append(item)

            cart.total = reprice(cart.items)
            logger.info(
                "item added cart_id=%s product_id=%s quantity=%s total=%s",
                cart_id,
                product.product_id,
                item.quantity,
                cart.total,
            )
            return copy.deepcopy(cart)

    def update_quantity(self, cart_id: str, item_id: str, quantity: int) -> Cart:
        require_id(cart_id, errmsg.CART_ID_REQUIRED, ErrorCode.INVALID_CART_ID)
        require_id(item_id, errmsg.ITEM_ID_REQUIRED, ErrorCode.INVALID_ITEM_ID)
        if not is_positive_int(quantity):
            raise CartError(errmsg.QUANTITY_POSITIVE_INT, ErrorCode.INVALID_QUANTITY)

        with self._lock:
            cart = self._require_cart(cart_id)
            item = self._require_item(cart, item_id)

            item.quantity = quantity
            cart.total = reprice(cart.items)
            logger.info(
                "quantity updated cart_id=%s item_id=%s quantity=%s total=%s",
                cart_id,
                item_id,
                quantity,
                cart.total,
            )
            return copy.deepcopy(cart)

    def remove_item(self, cart_id: str, item_id: str) -> Cart:
        require_id(cart_id, errmsg.CART_ID_REQUIRED, ErrorCode.INVALID_CART_ID)
        require_id(item_id, errmsg.ITEM_ID_REQUIRED, ErrorCode.INVALID_ITEM_ID)

        with self._lock:
            cart = self._require_cart(cart_id)
            item = self._require_item(cart, item_id)

            cart.items.remove(item)
            cart.total = reprice(cart.items)
            logger.info("item removed cart_id=%s item_id=%s total=%s", cart_id, item_id, cart.total)
            return copy.deepcopy(cart)

    # ---------------- catalog ----------------

    def get_all_products(self) -> List[Product]:
        return self.catalog.list_all()

    # ---------------- helpers ----------------

    def _new_item(self, product: Product, quantity: int) -> CartItem:
        return CartItem(
            item_id=self.ids.next_item_id(),
            product_id=product.product_id,
            product_name=product.name,
            quantity=quantity,
            plan_type=product.plan_type,
            unit_price=product.price,
            total_price=line_total(product.price, quantity),
        )

    def _require_cart(self, cart_id: str) -> Cart:
        cart = self.store.get(cart_id)
        if cart is None:
            self._reject(cart_id, errmsg.CART_NOT_FOUND, ErrorCode.CART_NOT_FOUND)
        return cart

    def _require_item(self, cart: Cart, item_id: str) -> CartItem:
        item = cart.find_item(item_id)
        if item is None:
            self._reject(cart.cart_id, errmsg.ITEM_NOT_FOUND, ErrorCode.ITEM_NOT_FOUND)
        return item

    def _reject(self, cart_id: str, message: str, code: ErrorCode) -> NoReturn:
        logger.warning("rejected cart_id=%s code=%s: %s", cart_id, code.value, message)
        raise CartError(message, code)
