from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from workorder.config import DEFAULT_USER_AGENT, Settings
from workorder.errors import RenderError
from workorder.sources.models import RenderedPage

logger = logging.getLogger(__name__)

LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class PlaywrightRenderer:
    """
    Рендерит страницу в headless Chromium и отдает снимок DOM.

    Браузер живет только внутри render(): он закрывается при любом выходе
    из блока with, включая ошибки извлечения и валидации у вызывающего кода.
    """

    def __init__(
        self,
        timeout_ms: int = 30_000,
        settle_ms: int = 3_000,
        user_agent: str = DEFAULT_USER_AGENT,
        headless: bool = True,
    ):
        self.timeout_ms = timeout_ms
        self.settle_ms = settle_ms
        self.user_agent = user_agent
        self.headless = headless

    @classmethod
    def from_settings(cls, settings: Settings) -> PlaywrightRenderer:
        return cls(
            timeout_ms=settings.render_timeout_ms,
            settle_ms=settings.render_settle_ms,
            user_agent=settings.render_user_agent,
            headless=settings.render_headless,
        )

    @contextmanager
    def render(self, url: str) -> Iterator[RenderedPage]:
        with sync_playwright() as playwright:
            try:
                browser = playwright.chromium.launch(headless=self.headless, args=LAUNCH_ARGS)
            except PlaywrightError as exc:
                raise RenderError(f"Failed to launch browser: {exc}") from exc

            try:
                try:
                    context = browser.new_context(user_agent=self.user_agent)
                    page = context.new_page()
                    logger.info("Navigating to %s", url)
                    page.goto(url, wait_until="networkidle", timeout=self.timeout_ms)
                    # Printavo дорисовывает страницу на клиенте уже после networkidle
                    page.wait_for_timeout(self.settle_ms)
                    rendered = RenderedPage(url=url, html=page.content())
                except PlaywrightError as exc:
                    raise RenderError(f"Failed to scrape workorder: {exc}") from exc
                yield rendered
            finally:
                browser.close()
