PREPAID = "prepaid"
POSTPAID = "postpaid"

PLAN_TYPES = (PREPAID, POSTPAID)

CATEGORY_PLAN = "plan"
CATEGORY_DEVICE = "device"
CATEGORY_ADDON = "addon"

CATEGORIES = (CATEGORY_PLAN, CATEGORY_DEVICE, CATEGORY_ADDON)

# seed order is the listing order of /api/products
SEED_PRODUCTS = (
    {
        "product_id": "plan-basic",
        "name": "Basic Plan",
        "description": "Basic prepaid plan",
        "category": CATEGORY_PLAN,
        "plan_type": PREPAID,
        "price": 30,
    },
    {
        "product_id": "plan-unlimited",
        "name": "Unlimited Plan",
        "description": "Unlimited postpaid plan",
        "category": CATEGORY_PLAN,
        "plan_type": POSTPAID,
        "price": 80,
    },
    {
        "product_id": "device-phone",
        "name": "Smartphone",
        "description": "Latest smartphone",
        "category": CATEGORY_DEVICE,
        "plan_type": POSTPAID,
        "price": 500,
    },
)

CART_ID_PREFIX = "cart_"
ITEM_ID_PREFIX = "item_"

BUSINESS_RULES = (
    "Cannot mix prepaid and postpaid products in the same cart",
)
