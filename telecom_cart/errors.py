"""Cart failure codes and the exception carrying them."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_CUSTOMER_ID = "INVALID_CUSTOMER_ID"
    INVALID_CART_ID = "INVALID_CART_ID"
    INVALID_ITEM_ID = "INVALID_ITEM_ID"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    CART_NOT_FOUND = "CART_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    PLAN_TYPE_MISMATCH = "PLAN_TYPE_MISMATCH"


class errmsg:
    """Messages returned alongside the codes."""

    CUSTOMER_ID_REQUIRED = "Customer ID is required"
    CART_ID_REQUIRED = "Cart ID is required"
    ITEM_ID_REQUIRED = "Item ID is required"
    QUANTITY_POSITIVE_INT = "Quantity must be a positive integer"
    CART_NOT_FOUND = "Cart not found"
    PRODUCT_NOT_FOUND = "Product not found"
    ITEM_NOT_FOUND = "Item not found in cart"
    PLAN_TYPE_MISMATCH = "Cannot mix {existing} and {new} products"


class CartError(Exception):
    """A cart operation was rejected. Never fatal to the process."""

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"CartError({self.message!r}, {self.code.value})"
