from __future__ import annotations

import json
import logging
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from typing import Any, Protocol

from workorder.clients import PrintavoClient
from workorder.config import Settings
from workorder.core.mapping import to_customer_payload, to_order_payload
from workorder.core.normalize import NormalizedOrder, RawExtractionResult, normalize
from workorder.errors import ApiError, InvalidWorkorderUrl, ValidationError, WorkorderError
from workorder.parsers import transform_page
from workorder.sources.models import RenderedPage

from .diagnostics import analyze_extraction, build_recommendations

WORKORDER_PATH_MARKER = "work_orders/"
INVOICE_PATH_MARKER = "invoice/"


class Renderer(Protocol):
    def render(self, url: str) -> AbstractContextManager[RenderedPage]: ...


def validate_workorder_url(url: str | None, allow_invoice: bool = False) -> str:
    value = (url or "").strip()
    markers = [WORKORDER_PATH_MARKER]
    if allow_invoice:
        markers.append(INVOICE_PATH_MARKER)
    if not value or not any(marker in value for marker in markers):
        expected = " or ".join(markers)
        raise InvalidWorkorderUrl(
            f"Invalid workorder URL format. Expected a URL containing '{expected}', "
            "e.g. [subdomain].printavo.com/work_orders/[hash]"
        )
    return value


def _failure(exc: WorkorderError) -> dict[str, Any]:
    details = f"{exc.__class__.__name__}: {exc}"
    if isinstance(exc, ApiError) and exc.body is not None:
        body = exc.body if isinstance(exc.body, str) else json.dumps(exc.body, ensure_ascii=False)
        details = f"{details}\nHTTP {exc.status_code}: {body}"
    return {"success": False, "error": str(exc), "details": details}


class WorkorderImportService:
    def __init__(
        self,
        settings: Settings,
        renderer: Renderer,
        logger: logging.Logger | logging.LoggerAdapter,
    ):
        self.settings = settings
        self.renderer = renderer
        self.logger = logger

    def scrape(self, url: str) -> tuple[RawExtractionResult, NormalizedOrder | None, ValidationError | None]:
        with self.renderer.render(url) as page:
            raw = transform_page(page.document(), raw_html=page.html)
        try:
            return raw, normalize(raw), None
        except ValidationError as exc:
            return raw, None, exc

    def extract(self, url: str) -> NormalizedOrder:
        with self.renderer.render(url) as page:
            raw = transform_page(page.document(), raw_html=page.html)
            self.logger.info(
                "Extracted workorder %r: customer=%r, line_items=%s",
                raw.order_number,
                raw.customer_name,
                len(raw.line_items),
            )
            return normalize(raw)

    def process(
        self,
        url: str,
        user_id: int | str,
        status_id: int | str,
        client: PrintavoClient,
    ) -> dict[str, Any]:
        """
        Полный цикл: рендер и извлечение, затем клиент и заказ в Printavo.

        Вызовы API последовательные: заказу нужен id созданного клиента.
        Повторов нет, любая ошибка возвращается как результат success=False.
        """
        try:
            self.logger.info("1. Scraping workorder data: %s", url)
            order = self.extract(url)

            self.logger.info("2. Creating customer")
            customer = client.create_customer(to_customer_payload(order))
            customer_id = customer.get("id")
            if customer_id is None:
                raise ApiError("Failed to create customer: response has no id", body=customer)
            self.logger.info("Customer created: id=%s", customer_id)

            self.logger.info("3. Creating order")
            created_order = client.create_order(
                to_order_payload(
                    order,
                    customer_id=customer_id,
                    user_id=user_id,
                    status_id=status_id,
                    notes=self.settings.order_notes,
                )
            )
            self.logger.info("Order created: id=%s", created_order.get("id"))
        except WorkorderError as exc:
            self.logger.error("Processing failed: %s", exc)
            return _failure(exc)

        customer_label = " ".join(
            part for part in [customer.get("first_name"), customer.get("last_name")] if part
        ) or order.company or order.customer_email
        return {
            "success": True,
            "customer": customer,
            "order": created_order,
            "workorderData": order.to_dict(),
            "message": (
                "Successfully processed workorder! "
                f"Customer: {customer_label}, Order: #{created_order.get('id')}"
            ),
        }

    def diagnose(self, url: str) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).isoformat()
        try:
            raw, normalized, validation_error = self.scrape(url)
        except WorkorderError as exc:
            self.logger.error("Diagnostic scrape failed: %s", exc)
            return {**_failure(exc), "timestamp": timestamp}

        analysis = analyze_extraction(raw, normalized)
        self.logger.info("Diagnostic analysis for %s: %s", url, analysis)
        return {
            "success": True,
            "workorderData": raw.to_dict(),
            "normalized": normalized.to_dict() if normalized else None,
            "validationError": str(validation_error) if validation_error else None,
            "analysis": analysis,
            "recommendations": build_recommendations(analysis, validation_error),
            "timestamp": timestamp,
        }
