from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

# Библиотеки, которые на INFO пишут каждое соединение
NOISY_LOGGERS = ("urllib3", "asyncio", "playwright")


class CorrelationIdFilter(logging.Filter):
    def __init__(self, correlation_id: str):
        super().__init__()
        self._correlation_id = correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = self._correlation_id
        return True


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def _file_handler(path: Path, formatter: logging.Formatter, log_filter: logging.Filter) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(formatter)
    handler.addFilter(log_filter)
    return handler


def configure_logging(log_dir: Path, correlation_id: str = "-", level: int = logging.INFO) -> None:
    """
    Текстовый лог в stderr и файл плюс JSONL для разбора.

    В режиме сервера correlation_id процесса равен "server", а у каждого
    запроса свой id через get_logger(); записи сторонних библиотек получают
    id процесса.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    utc_day = datetime.now(timezone.utc).strftime("%Y-%m-%d")

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    correlation_filter = CorrelationIdFilter(correlation_id)
    text_formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    json_formatter = jsonlogger.JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(correlation_id)s %(message)s"
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(text_formatter)
    stream_handler.addFilter(correlation_filter)

    root.addHandler(stream_handler)
    root.addHandler(_file_handler(log_dir / f"workorder-{utc_day}.log", text_formatter, correlation_filter))
    root.addHandler(_file_handler(log_dir / f"workorder-{utc_day}.jsonl", json_formatter, correlation_filter))


def get_logger(name: str, correlation_id: str, **context: Any) -> logging.LoggerAdapter:
    """Адаптер с correlation_id; доп. поля (например workorder_url) попадают в JSONL."""
    base_logger = logging.getLogger(name)
    return logging.LoggerAdapter(base_logger, extra={"correlation_id": correlation_id, **context})
