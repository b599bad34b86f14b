from __future__ import annotations

import importlib.util
import os
import platform
import sys

from workorder.config import Settings


def run_doctor_checks(settings: Settings) -> list[dict[str, str]]:
    checks: list[dict[str, str]] = []

    checks.append(
        {
            "check": "python_version",
            "status": "ok" if sys.version_info >= (3, 11) else "warn",
            "detail": platform.python_version(),
        }
    )

    # Наличие бинарника Chromium не проверяем: это требует запуска браузера
    playwright_installed = importlib.util.find_spec("playwright") is not None
    checks.append(
        {
            "check": "playwright",
            "status": "ok" if playwright_installed else "fail",
            "detail": "installed" if playwright_installed else "pip install playwright && playwright install chromium",
        }
    )

    checks.append(
        {
            "check": "printavo_credentials",
            "status": "ok" if settings.has_api_credentials else "warn",
            "detail": settings.api_email or "PRINTAVO_EMAIL/PRINTAVO_TOKEN не заданы (будут браться из формы)",
        }
    )

    checks.append(
        {
            "check": "printavo_api_base",
            "status": "ok" if settings.api_base.startswith("https://") else "warn",
            "detail": settings.api_base,
        }
    )

    logs_writable = settings.logs_dir.exists() and os.access(settings.logs_dir, os.W_OK)
    checks.append(
        {
            "check": "logs_dir",
            "status": "ok" if logs_writable else "warn",
            "detail": str(settings.logs_dir),
        }
    )

    return checks
