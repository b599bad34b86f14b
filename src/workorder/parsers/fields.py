from __future__ import annotations

from collections.abc import Iterable

from bs4 import Tag


def element_text(element: Tag | None) -> str:
    if element is None:
        return ""
    return element.get_text().strip()


def extract_field(document: Tag, candidates: Iterable[str]) -> str:
    """
    Возвращает текст первого непустого совпадения по списку селекторов.

    Порядок кандидатов значим: более поздние селекторы не рассматриваются,
    если ранний дал текст. Отсутствие данных не ошибка, а пустая строка.
    """
    for selector in candidates:
        text = element_text(document.select_one(selector))
        if text:
            return text
    return ""


def first_match(document: Tag, candidates: Iterable[str]) -> Tag | None:
    # Первое совпадение в порядке документа, а не в порядке списка; пустой текст не пропускается
    return document.select_one(", ".join(candidates))
