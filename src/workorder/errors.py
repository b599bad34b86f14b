from __future__ import annotations

from typing import Any


class WorkorderError(Exception):
    """Базовая ошибка: завершает обработку одного workorder."""


class RenderError(WorkorderError):
    pass


class ValidationError(WorkorderError):
    pass


class ApiError(WorkorderError):
    def __init__(self, message: str, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidWorkorderUrl(ValueError):
    pass
