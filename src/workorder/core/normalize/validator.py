from __future__ import annotations

import math
from datetime import datetime, timezone

from workorder.errors import ValidationError

from .models import NormalizedOrder, RawExtractionResult, RawLineItem

# Лимит поля style_description в Printavo
DESCRIPTION_LIMIT = 255


def split_name(full_name: str | None) -> tuple[str, str]:
    parts = (full_name or "").split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def _clamp_price(value: float | None) -> float:
    if value is None or math.isnan(value) or value < 0:
        return 0.0
    return float(value)


def _clamp_quantity(value: float | None) -> int:
    if value is None or math.isnan(value) or value < 1:
        return 1
    return int(value)


def _clean_item(item: RawLineItem) -> RawLineItem:
    quantity = _clamp_quantity(item.quantity)
    # Количество переносится в тот же размерный бакет, уже после ограничения
    buckets = {label: quantity for label in item.size_buckets} or {"other": quantity}
    return RawLineItem(
        description=item.description[:DESCRIPTION_LIMIT],
        quantity=quantity,
        unit_price=_clamp_price(item.unit_price),
        color=item.color,
        size_buckets=buckets,
    )


def normalize(raw: RawExtractionResult, now: datetime | None = None) -> NormalizedOrder:
    first_name, last_name = split_name(raw.customer_name)
    if not first_name and not raw.company and not raw.customer_email:
        raise ValidationError("missing customer identity")

    line_items = tuple(_clean_item(item) for item in raw.line_items if item.description)
    if not line_items:
        raise ValidationError("no line items")

    return NormalizedOrder(
        first_name=first_name,
        last_name=last_name,
        extracted_at=now or datetime.now(timezone.utc),
        customer_name=raw.customer_name,
        customer_email=raw.customer_email,
        customer_phone=raw.customer_phone,
        company=raw.company,
        order_number=raw.order_number,
        due_date=raw.due_date,
        shipping_address=raw.shipping_address,
        line_items=line_items,
        production_notes=raw.production_notes,
        raw_markup_sample=raw.raw_markup_sample,
    )
