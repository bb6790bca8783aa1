from typing import Optional

from telecom_cart.config import settings


def money(v: float, currency: Optional[str] = None) -> str:
    return f"{float(v):.{settings.decimals}f} {currency or settings.currency}"
