from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from workorder.core.normalize import RawExtractionResult, ShippingAddress

from .fields import extract_field
from .line_items import extract_line_items
from .selectors import ADDRESS_SELECTORS, DEFAULT_COUNTRY, FIELD_SELECTORS
from .utils import markup_sample


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def _extract_address(document: Tag) -> ShippingAddress:
    values = {name: extract_field(document, selectors) for name, selectors in ADDRESS_SELECTORS.items()}
    values["country"] = values["country"] or DEFAULT_COUNTRY
    return ShippingAddress(**values)


def transform_page(document: Tag, raw_html: str = "") -> RawExtractionResult:
    """
    Собирает сырой результат извлечения из отрендеренной страницы workorder.

    Функция чистая: только читает документ. Пустые поля остаются пустыми
    строками, решение о пригодности данных принимает normalize().
    """
    fields = {name: extract_field(document, selectors) for name, selectors in FIELD_SELECTORS.items()}

    return RawExtractionResult(
        customer_name=fields["customer_name"],
        customer_email=fields["customer_email"],
        customer_phone=fields["customer_phone"],
        company=fields["company"],
        order_number=fields["order_number"],
        due_date=fields["due_date"],
        shipping_address=_extract_address(document),
        line_items=tuple(extract_line_items(document)),
        production_notes=fields["production_notes"],
        raw_markup_sample=markup_sample(raw_html),
    )


def parse_workorder_html(html: str) -> RawExtractionResult:
    return transform_page(parse_document(html), raw_html=html)
