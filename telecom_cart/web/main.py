from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from telecom_cart.config import settings
from telecom_cart.constants import BUSINESS_RULES
from telecom_cart.errors import CartError, ErrorCode, errmsg
from telecom_cart.services.cart_service import CartService
from telecom_cart.web.schemas import (
    AddItemRequest,
    CartOut,
    CreateCartRequest,
    ErrorOut,
    ProductOut,
    UpdateQuantityRequest,
)

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {ErrorCode.CART_NOT_FOUND}

ENDPOINTS = {
    "POST /api/carts": "Create cart",
    "GET /api/cart/:cartId": "Get cart",
    "POST /api/cart/:cartId/items": "Add item to cart",
    "DELETE /api/cart/:cartId/items/:itemId": "Remove item from cart",
    "PUT /api/cart/:cartId/items/:itemId": "Update item quantity",
    "DELETE /api/cart/:cartId": "Clear cart",
    "GET /api/products": "Get all products",
}

ERROR_RESPONSES = {400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 500: {"model": ErrorOut}}

router = APIRouter(responses=ERROR_RESPONSES)


def get_cart_service(request: Request) -> CartService:
    return request.app.state.cart_service


def _error(status_code: int, message: str, code: Optional[str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "code": code})


# ---------------- error handlers ----------------

async def _cart_error_handler(request: Request, exc: CartError) -> JSONResponse:
    status = 404 if exc.code in NOT_FOUND_CODES else 400
    return _error(status, exc.message, exc.code.value)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = f"{field}: {first.get('msg', 'invalid request')}" if field else "Invalid request body"
    return _error(400, message, "INVALID_REQUEST")


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error", "INTERNAL_ERROR")


# ---------------- info ----------------

@router.get("/")
def index() -> dict[str, Any]:
    return {
        "message": "Telecom Cart API",
        "endpoints": ENDPOINTS,
        "businessRules": list(BUSINESS_RULES),
    }


# ---------------- carts ----------------

@router.post("/api/carts", status_code=201, response_model=CartOut)
def create_cart(
    body: Optional[CreateCartRequest] = None,
    service: CartService = Depends(get_cart_service),
):
    customer_id = body.customer_id if body is not None else None
    cart = service.create_cart(customer_id)
    return CartOut.model_validate(cart)


@router.get("/api/cart/{cart_id}", response_model=CartOut)
def get_cart(cart_id: str, service: CartService = Depends(get_cart_service)):
    cart = service.get_cart(cart_id)
    if cart is None:
        return _error(404, errmsg.CART_NOT_FOUND, ErrorCode.CART_NOT_FOUND.value)
    return CartOut.model_validate(cart)


@router.delete("/api/cart/{cart_id}", response_model=CartOut)
def clear_cart(cart_id: str, service: CartService = Depends(get_cart_service)):
    return CartOut.model_validate(service.clear_cart(cart_id))


# ---------------- items ----------------

@router.post("/api/cart/{cart_id}/items", response_model=CartOut)
def add_item(
    cart_id: str,
    body: AddItemRequest,
    service: CartService = Depends(get_cart_service),
):
    cart = service.add_item(cart_id, body.product_id, body.quantity)
    return CartOut.model_validate(cart)


@router.put("/api/cart/{cart_id}/items/{item_id}", response_model=CartOut)
def update_quantity(
    cart_id: str,
    item_id: str,
    body: UpdateQuantityRequest,
    service: CartService = Depends(get_cart_service),
):
    cart = service.update_quantity(cart_id, item_id, body.quantity)
    return CartOut.model_validate(cart)


@router.delete("/api/cart/{cart_id}/items/{item_id}", response_model=CartOut)
def remove_item(cart_id: str, item_id: str, service: CartService = Depends(get_cart_service)):
    return CartOut.model_validate(service.remove_item(cart_id, item_id))


# ---------------- products ----------------

@router.get("/api/products", response_model=List[ProductOut])
def products(service: CartService = Depends(get_cart_service)):
    return [ProductOut.model_validate(p) for p in service.get_all_products()]


def create_app(service: Optional[CartService] = None) -> FastAPI:
    app = FastAPI(title="Telecom Cart API")
    app.state.cart_service = service if service is not None else CartService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(CartError, _cart_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)

    app.include_router(router)
    return app


app = create_app()
