from __future__ import annotations

# Селекторы перебираются по порядку, побеждает первое непустое совпадение.
FIELD_SELECTORS: dict[str, list[str]] = {
    "customer_name": [
        ".customer-name",
        ".customer-info h3",
        ".customer-info .name",
        "[data-customer-name]",
        "h2.customer",
        ".invoice-header .customer",
    ],
    "customer_email": [
        ".customer-email",
        ".customer-info .email",
        "[data-customer-email]",
        'a[href^="mailto:"]',
    ],
    "customer_phone": [
        ".customer-phone",
        ".customer-info .phone",
        "[data-customer-phone]",
        ".phone",
    ],
    "company": [
        ".customer-company",
        ".company-name",
        "[data-company]",
        ".customer-info .company",
    ],
    "order_number": [
        ".order-number",
        ".invoice-number",
        "h1",
        ".order-id",
        "[data-order-number]",
    ],
    "due_date": [
        ".due-date",
        ".customer-due-date",
        "[data-due-date]",
        ".dates .due",
    ],
    "production_notes": [
        ".production-notes",
        ".notes",
        ".special-instructions",
        ".comments",
        "[data-notes]",
    ],
}

ADDRESS_SELECTORS: dict[str, list[str]] = {
    "address1": [".shipping-address .address1", ".ship-to .address1", ".shipping .street"],
    "address2": [".shipping-address .address2", ".ship-to .address2"],
    "city": [".shipping-address .city", ".ship-to .city", ".shipping .city"],
    "state": [".shipping-address .state", ".ship-to .state", ".shipping .state"],
    "zip": [".shipping-address .zip", ".ship-to .zip", ".shipping .zip"],
    "country": [".shipping-address .country", ".ship-to .country"],
}

DEFAULT_COUNTRY = "US"

LINE_ITEM_ROW_SELECTORS = [
    ".line-items tr",
    ".invoice-line-items tr",
    ".order-items tr",
    "table tbody tr",
    ".line-item-row",
]
LINE_ITEM_CELL_SELECTOR = "td"
MIN_ROW_CELLS = 3

LINE_ITEM_BLOCK_SELECTOR = ".line-item, .item, .product-line"
BLOCK_DESCRIPTION_SELECTORS = [".description", ".item-name", ".product-name"]
BLOCK_QUANTITY_SELECTORS = [".quantity", ".qty"]
BLOCK_PRICE_SELECTORS = [".price", ".unit-price", ".cost"]
