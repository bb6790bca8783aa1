"""
Walks a running Telecom Cart API through the prepaid/postpaid scenario.

    python -m telecom_cart.demo --base-url http://localhost:3000
"""
from __future__ import annotations

import argparse
import json
from typing import Any, Optional

import httpx

from telecom_cart.config import settings
from telecom_cart.utils.formatters import money


def call(client: httpx.Client, method: str, path: str, data: Optional[dict] = None) -> tuple[int, Any]:
    resp = client.request(method, path, json=data)
    try:
        body: Any = resp.json()
    except ValueError:
        body = resp.text
    print(f"{method} {path}: {resp.status_code}")
    print(json.dumps(body, indent=2) if not isinstance(body, str) else body)
    return resp.status_code, body


def run_demo(client: httpx.Client) -> dict[str, Any]:
    """Run the scenario and return the final state of both carts."""
    print("Starting Telecom Cart Demo\n")

    print("API Info:")
    call(client, "GET", "/")

    print("\nAvailable Products:")
    call(client, "GET", "/api/products")

    print("\nCreating Cart:")
    _, cart = call(client, "POST", "/api/carts", {"customerId": "demo-customer"})
    cart_id = cart["cartId"]

    print("\nAdding Basic Plan (prepaid):")
    _, cart = call(client, "POST", f"/api/cart/{cart_id}/items", {"productId": "plan-basic", "quantity": 1})
    print(f"total: {money(cart['total'])}")

    print("\nTrying to add Smartphone (postpaid) - should fail:")
    status, err = call(client, "POST", f"/api/cart/{cart_id}/items", {"productId": "device-phone", "quantity": 1})
    rejected = status == 400 and err.get("code") == "PLAN_TYPE_MISMATCH"

    print("\nCreating second cart for postpaid products:")
    _, cart2 = call(client, "POST", "/api/carts", {"customerId": "demo-customer-2"})
    cart2_id = cart2["cartId"]

    print("\nAdding Unlimited Plan (postpaid):")
    call(client, "POST", f"/api/cart/{cart2_id}/items", {"productId": "plan-unlimited", "quantity": 1})

    print("\nAdding Smartphone (postpaid) - should succeed:")
    _, cart2 = call(client, "POST", f"/api/cart/{cart2_id}/items", {"productId": "device-phone", "quantity": 1})
    print(f"total: {money(cart2['total'])}")

    phone = next(it for it in cart2["items"] if it["productId"] == "device-phone")

    print("\nUpdating Smartphone quantity to 2:")
    _, cart2 = call(client, "PUT", f"/api/cart/{cart2_id}/items/{phone['itemId']}", {"quantity": 2})
    print(f"total: {money(cart2['total'])}")

    print("\nRemoving Smartphone:")
    _, cart2 = call(client, "DELETE", f"/api/cart/{cart2_id}/items/{phone['itemId']}")
    print(f"total: {money(cart2['total'])}")

    print("\nClearing first cart:")
    _, cart = call(client, "DELETE", f"/api/cart/{cart_id}")

    print("\nGetting unknown cart:")
    missing_status, _ = call(client, "GET", "/api/cart/cart_does_not_exist")

    print("\nDemo completed")
    return {
        "cart": cart,
        "cart2": cart2,
        "mismatch_rejected": rejected,
        "missing_status": missing_status,
    }


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Telecom Cart API demo")
    parser.add_argument("--base-url", default=f"http://localhost:{settings.port}")
    args = parser.parse_args(argv)

    with httpx.Client(base_url=args.base_url, timeout=10.0) as client:
        run_demo(client)


if __name__ == "__main__":
    main()
