from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import pytest
from bs4 import BeautifulSoup

from workorder.config import Settings
from workorder.errors import RenderError
from workorder.sources.models import RenderedPage

PAGES_DIR = Path(__file__).parent / "fixtures" / "pages"


def load_page(name: str) -> str:
    return (PAGES_DIR / name).read_text(encoding="utf-8")


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class FakeRenderer:
    """Отдает заранее подготовленный HTML и запоминает открытия/закрытия."""

    def __init__(self, html: str = "", error: Exception | None = None):
        self.html = html
        self.error = error
        self.opened: list[str] = []
        self.closed = 0

    @contextmanager
    def render(self, url: str):
        self.opened.append(url)
        try:
            if self.error is not None:
                raise self.error
            yield RenderedPage(url=url, html=self.html)
        finally:
            self.closed += 1


class FakeResponse:
    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self._body = body
        self.text = "" if body is None else str(body)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if isinstance(self._body, (dict, list)):
            return self._body
        raise ValueError("not json")


class FakeSession:
    def __init__(self, responses: dict[str, FakeResponse]):
        self.responses = responses
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        resource = url.rsplit("/", 1)[-1]
        return self.responses[resource]


class FakeClient:
    def __init__(self, customer: dict | None = None, order: dict | None = None, error: Exception | None = None):
        self.customer = customer or {"id": 501, "first_name": "Jane", "last_name": "Doe"}
        self.order = order or {"id": 9001, "url": "https://www.printavo.com/orders/9001"}
        self.error = error
        self.customer_payloads: list[dict] = []
        self.order_payloads: list[dict] = []

    def create_customer(self, payload: dict) -> dict:
        self.customer_payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.customer

    def create_order(self, payload: dict) -> dict:
        self.order_payloads.append(payload)
        return self.order


@pytest.fixture()
def settings(tmp_path: Path, monkeypatch) -> Settings:  # noqa: ANN001
    for name in ["PRINTAVO_EMAIL", "PRINTAVO_TOKEN", "PRINTAVO_API_BASE", "WORKORDER_HOME", "WORKORDER_LOG_DIR"]:
        monkeypatch.delenv(name, raising=False)
    root = tmp_path / "project"
    root.mkdir(parents=True, exist_ok=True)
    s = Settings.load(base_dir=root)
    s.ensure_directories()
    return s


@pytest.fixture()
def test_logger() -> logging.Logger:
    logger = logging.getLogger("workorder-test")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.INFO)
    return logger


@pytest.fixture()
def render_failure() -> RenderError:
    return RenderError("Failed to scrape workorder: Timeout 30000ms exceeded")
