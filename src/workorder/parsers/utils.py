from __future__ import annotations

import re

NON_DIGIT_PATTERN = re.compile(r"[^0-9]")
PRICE_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?")

SIZE_BUCKETS = ("xs", "s", "m", "l", "xl", "2xl", "3xl", "other")
DEFAULT_SIZE_BUCKET = "other"

# Порядок проверки важен: при нескольких совпадениях берется первая группа.
SIZE_HINTS: list[tuple[str, tuple[str, ...]]] = [
    ("s", ("small", " s ")),
    ("m", ("medium", " m ")),
    ("l", ("large", " l ")),
    ("xl", ("xl",)),
]

MARKUP_SAMPLE_LIMIT = 5000


def extract_number(text: str | None) -> int:
    digits = NON_DIGIT_PATTERN.sub("", text or "")
    if not digits:
        return 0
    return int(digits)


def extract_price(text: str | None) -> float:
    match = PRICE_PATTERN.search(text or "")
    if not match:
        return 0.0
    return float(match.group(0))


def infer_size_bucket(description: str | None) -> str:
    lowered = (description or "").lower()
    for bucket, markers in SIZE_HINTS:
        if any(marker in lowered for marker in markers):
            return bucket
    return DEFAULT_SIZE_BUCKET


def markup_sample(html: str | None, limit: int = MARKUP_SAMPLE_LIMIT) -> str:
    if not html:
        return ""
    return html[:limit] + "..."
