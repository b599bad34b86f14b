from __future__ import annotations

from typing import Any

import requests

from workorder.config import DEFAULT_API_BASE
from workorder.errors import ApiError


def _error_message(body: Any, fallback: str) -> str:
    if isinstance(body, dict):
        for key in ("message", "error", "errors"):
            value = body.get(key)
            if value:
                return value if isinstance(value, str) else str(value)
    return fallback


class PrintavoClient:
    def __init__(
        self,
        email: str,
        token: str,
        base_url: str = DEFAULT_API_BASE,
        timeout_sec: float = 30.0,
        session: requests.Session | None = None,
    ):
        self.email = email
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()

    def _post(self, resource: str, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/{resource}"
        try:
            response = self.session.post(
                url,
                json=payload,
                params={"email": self.email, "token": self.token},
                timeout=self.timeout_sec,
            )
        except requests.RequestException as exc:
            raise ApiError(f"Failed to create {resource.rstrip('s')}: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = response.text or None

        if not response.ok:
            message = _error_message(body, f"HTTP {response.status_code}")
            raise ApiError(
                f"Failed to create {resource.rstrip('s')}: {message}",
                status_code=response.status_code,
                body=body,
            )
        if not isinstance(body, dict):
            raise ApiError(
                f"Failed to create {resource.rstrip('s')}: unexpected response body",
                status_code=response.status_code,
                body=body,
            )
        return body

    def create_customer(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._post("customers", payload)

    def create_order(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._post("orders", payload)
