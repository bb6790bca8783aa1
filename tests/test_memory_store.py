from datetime import datetime, timezone

import pytest

from telecom_cart.db.memory import CartStore, Catalog
from telecom_cart.db.models import Cart
from telecom_cart.services.ids import IdGenerator


def test_seed_catalog_order_and_values():
    catalog = Catalog()

    products = catalog.list_all()
    assert [p.product_id for p in products] == ["plan-basic", "plan-unlimited", "device-phone"]

    basic = catalog.lookup("plan-basic")
    assert basic.name == "Basic Plan"
    assert basic.category == "plan"
    assert basic.plan_type == "prepaid"
    assert basic.price == 30

    assert catalog.lookup("plan-unlimited").price == 80
    assert catalog.lookup("plan-unlimited").plan_type == "postpaid"
    phone = catalog.lookup("device-phone")
    assert (phone.name, phone.category, phone.plan_type, phone.price) == ("Smartphone", "device", "postpaid", 500)


def test_lookup_unknown_product_returns_none():
    assert Catalog().lookup("plan-gold") is None


def test_catalog_rejects_bad_rows():
    row = {
        "product_id": "addon-roaming",
        "name": "Roaming",
        "description": "Roaming pack",
        "category": "addon",
        "plan_type": "hybrid",
        "price": 10,
    }
    with pytest.raises(ValueError):
        Catalog([row])

    with pytest.raises(ValueError):
        Catalog([dict(row, plan_type="prepaid", price=-1)])

    ok = dict(row, plan_type="prepaid")
    with pytest.raises(ValueError):
        Catalog([ok, ok])


def test_catalog_custom_rows_keep_order():
    rows = [
        {"product_id": "b", "name": "B", "description": "", "category": "addon", "plan_type": "prepaid", "price": 5},
        {"product_id": "a", "name": "A", "description": "", "category": "addon", "plan_type": "prepaid", "price": 0},
    ]
    catalog = Catalog(rows)
    assert [p.product_id for p in catalog.list_all()] == ["b", "a"]
    assert len(catalog) == 2


def test_cart_store_insert_and_get():
    store = CartStore()
    cart = Cart(cart_id="cart_1", customer_id="c", created_at=datetime.now(timezone.utc))

    store.insert(cart)

    assert store.get("cart_1") is cart
    assert store.get("cart_2") is None
    assert len(store) == 1

    with pytest.raises(KeyError):
        store.insert(cart)


def test_id_generator_never_repeats():
    ids = IdGenerator()
    cart_ids = [ids.next_cart_id() for _ in range(5)]
    item_ids = [ids.next_item_id() for _ in range(5)]

    assert cart_ids == ["cart_1", "cart_2", "cart_3", "cart_4", "cart_5"]
    assert item_ids == ["item_1", "item_2", "item_3", "item_4", "item_5"]


def test_id_generators_are_independent():
    a, b = IdGenerator(), IdGenerator(start=10)
    a.next_cart_id()
    assert a.next_cart_id() == "cart_2"
    assert b.next_cart_id() == "cart_10"
