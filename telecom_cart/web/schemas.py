from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StringConstraints
from pydantic.alias_generators import to_camel


class _Schema(BaseModel):
    # camelCase on the wire, snake_case in python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# ---------------- requests ----------------

class CreateCartRequest(_Schema):
    customer_id: Optional[str] = None


class AddItemRequest(_Schema):
    product_id: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    quantity: StrictInt = 1


class UpdateQuantityRequest(_Schema):
    # no coercion: true and 1.5 reach the service as sent, strings are rejected here
    quantity: Union[StrictInt, StrictFloat, StrictBool]


# ---------------- responses ----------------

class ProductOut(_Schema):
    product_id: str
    name: str
    description: str
    category: str
    plan_type: str
    price: float


class CartItemOut(_Schema):
    item_id: str
    product_id: str
    product_name: str
    quantity: int
    plan_type: str
    unit_price: float
    total_price: float


class CartOut(_Schema):
    cart_id: str
    customer_id: str
    items: List[CartItemOut]
    total: float
    created_at: datetime


class ErrorOut(BaseModel):
    error: str
    code: Optional[str] = None
