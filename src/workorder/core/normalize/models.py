from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class ShippingAddress:
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = "US"

    def to_dict(self) -> dict[str, str]:
        return {
            "address1": self.address1,
            "address2": self.address2,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "country": self.country,
        }


@dataclass(frozen=True, slots=True)
class RawLineItem:
    description: str
    quantity: int = 0
    unit_price: float = 0.0
    color: str = ""
    size_buckets: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
            "color": self.color,
            "sizeBuckets": dict(self.size_buckets),
        }


@dataclass(frozen=True, slots=True)
class RawExtractionResult:
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    company: str = ""
    order_number: str = ""
    due_date: str = ""
    shipping_address: ShippingAddress = field(default_factory=ShippingAddress)
    line_items: tuple[RawLineItem, ...] = ()
    production_notes: str = ""
    raw_markup_sample: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "customerName": self.customer_name,
            "customerEmail": self.customer_email,
            "customerPhone": self.customer_phone,
            "company": self.company,
            "orderNumber": self.order_number,
            "dueDate": self.due_date,
            "shippingAddress": self.shipping_address.to_dict(),
            "lineItems": [item.to_dict() for item in self.line_items],
            "productionNotes": self.production_notes,
            "rawMarkupSample": self.raw_markup_sample,
        }


@dataclass(frozen=True, slots=True)
class NormalizedOrder:
    """Результат извлечения, прошедший валидацию и готовый к отправке в API."""

    first_name: str
    last_name: str
    extracted_at: datetime
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    company: str = ""
    order_number: str = ""
    due_date: str = ""
    shipping_address: ShippingAddress = field(default_factory=ShippingAddress)
    line_items: tuple[RawLineItem, ...] = ()
    production_notes: str = ""
    raw_markup_sample: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "customerName": self.customer_name,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "customerEmail": self.customer_email,
            "customerPhone": self.customer_phone,
            "company": self.company,
            "orderNumber": self.order_number,
            "dueDate": self.due_date,
            "shippingAddress": self.shipping_address.to_dict(),
            "lineItems": [item.to_dict() for item in self.line_items],
            "productionNotes": self.production_notes,
            "rawMarkupSample": self.raw_markup_sample,
            "extractedAt": self.extracted_at.isoformat(),
        }
