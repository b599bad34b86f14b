from .printavo import (
    format_date,
    size_column,
    to_customer_payload,
    to_line_item_payload,
    to_order_payload,
)

__all__ = [
    "format_date",
    "size_column",
    "to_customer_payload",
    "to_line_item_payload",
    "to_order_payload",
]
