from typing import Any

from telecom_cart.errors import CartError, ErrorCode


def require_id(v: Any, message: str, code: ErrorCode) -> str:
    if not isinstance(v, str) or not v.strip():
        raise CartError(message, code)
    return v


def is_positive_int(v: Any) -> bool:
    # bool is an int subclass, True is not a quantity
    return isinstance(v, int) and not isinstance(v, bool) and v > 0
