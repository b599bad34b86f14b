from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

from dateutil import parser as dt_parser

from workorder.config import DEFAULT_ORDER_NOTES
from workorder.core.normalize import NormalizedOrder, RawLineItem, ShippingAddress
from workorder.parsers.utils import DEFAULT_SIZE_BUCKET, SIZE_BUCKETS

DEFAULT_DUE_DAYS = 14


def _format_mdy(value: date) -> str:
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def format_date(value: str | None, today: date | None = None) -> str:
    """MM/DD/YYYY; пустая или нераспознанная дата заменяется на сегодня + 14 дней."""
    if value and value.strip():
        try:
            return _format_mdy(dt_parser.parse(value.strip()).date())
        except (ValueError, OverflowError):
            pass
    base = today or datetime.now().date()
    return _format_mdy(base + timedelta(days=DEFAULT_DUE_DAYS))


def _address_payload(address: ShippingAddress) -> dict[str, str]:
    return {
        "address1": address.address1,
        "address2": address.address2,
        "city": address.city,
        "state": address.state,
        "zip": address.zip,
        "country": address.country or "US",
    }


def to_customer_payload(order: NormalizedOrder) -> dict[str, Any]:
    # Адрес в workorder один, он же используется и для счета
    return {
        "first_name": order.first_name,
        "last_name": order.last_name,
        "company": order.company,
        "customer_email": order.customer_email,
        "phone": order.customer_phone,
        "shipping_address_attributes": _address_payload(order.shipping_address),
        "billing_address_attributes": _address_payload(order.shipping_address),
    }


def size_column(label: str) -> str:
    bucket = label.strip().lower()
    if bucket not in SIZE_BUCKETS:
        bucket = DEFAULT_SIZE_BUCKET
    return f"size_{bucket}"


def to_line_item_payload(item: RawLineItem) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "style_description": item.description,
        "unit_cost": item.unit_price,
        "color": item.color,
        "taxable": True,
    }
    for bucket in SIZE_BUCKETS:
        payload[f"size_{bucket}"] = 0
    for label, quantity in item.size_buckets.items():
        payload[size_column(label)] += quantity
    return payload


def to_order_payload(
    order: NormalizedOrder,
    customer_id: int | str,
    user_id: int | str,
    status_id: int | str,
    notes: str = DEFAULT_ORDER_NOTES,
    today: date | None = None,
) -> dict[str, Any]:
    due_date = format_date(order.due_date, today=today)
    return {
        "user_id": user_id,
        "customer_id": customer_id,
        "orderstatus_id": status_id,
        "formatted_due_date": due_date,
        "formatted_customer_due_date": due_date,
        "production_notes": order.production_notes or f"Imported from workorder: {order.order_number}",
        "notes": notes,
        "lineitems_attributes": [to_line_item_payload(item) for item in order.line_items],
    }
