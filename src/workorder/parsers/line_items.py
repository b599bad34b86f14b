from __future__ import annotations

from bs4 import Tag

from workorder.core.normalize import RawLineItem

from .fields import element_text, first_match
from .selectors import (
    BLOCK_DESCRIPTION_SELECTORS,
    BLOCK_PRICE_SELECTORS,
    BLOCK_QUANTITY_SELECTORS,
    LINE_ITEM_BLOCK_SELECTOR,
    LINE_ITEM_CELL_SELECTOR,
    LINE_ITEM_ROW_SELECTORS,
    MIN_ROW_CELLS,
)
from .utils import DEFAULT_SIZE_BUCKET, extract_number, extract_price, infer_size_bucket


def _parse_row(row: Tag) -> RawLineItem | None:
    cells = row.select(LINE_ITEM_CELL_SELECTOR)
    if len(cells) < MIN_ROW_CELLS:
        return None

    description = element_text(cells[0])
    quantity = extract_number(cells[1].get_text())
    return RawLineItem(
        description=description,
        quantity=quantity,
        unit_price=extract_price(cells[2].get_text()),
        color="",
        size_buckets={infer_size_bucket(description): quantity},
    )


def _items_from_rows(document: Tag) -> list[RawLineItem]:
    for selector in LINE_ITEM_ROW_SELECTORS:
        rows = document.select(selector)
        # Одна строка это только заголовок таблицы
        if len(rows) <= 1:
            continue

        items = [item for item in (_parse_row(row) for row in rows[1:]) if item is not None]
        if items:
            return items
    return []


def _items_from_blocks(document: Tag) -> list[RawLineItem]:
    items: list[RawLineItem] = []
    for block in document.select(LINE_ITEM_BLOCK_SELECTOR):
        # Текст самого блока берется, только если элемента описания нет совсем
        description_element = first_match(block, BLOCK_DESCRIPTION_SELECTORS)
        description = element_text(block if description_element is None else description_element)
        if not description:
            continue

        quantity = extract_number(element_text(first_match(block, BLOCK_QUANTITY_SELECTORS))) or 1
        items.append(
            RawLineItem(
                description=description,
                quantity=quantity,
                unit_price=extract_price(element_text(first_match(block, BLOCK_PRICE_SELECTORS))),
                color="",
                size_buckets={DEFAULT_SIZE_BUCKET: quantity},
            )
        )
    return items


def extract_line_items(document: Tag) -> list[RawLineItem]:
    items = _items_from_rows(document)
    if items:
        return items
    return _items_from_blocks(document)
