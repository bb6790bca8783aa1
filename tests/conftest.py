from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from telecom_cart.db.memory import CartStore, Catalog
from telecom_cart.services.cart_service import CartService
from telecom_cart.services.ids import IdGenerator
from telecom_cart.web.main import create_app

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def service():
    """Fresh service per test: own catalog, store, id counters and a fixed clock."""
    return CartService(
        catalog=Catalog(),
        store=CartStore(),
        ids=IdGenerator(),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def test_client(service):
    """TestClient bound to an app built around the per-test service."""
    with TestClient(create_app(service)) as client:
        yield client


@pytest.fixture
def cart(service):
    return service.create_cart("test-customer")
