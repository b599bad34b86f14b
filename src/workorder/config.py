from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_BASE = "https://www.printavo.com/api/v1"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ORDER_NOTES = "Original workorder imported by workorder-import"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Settings:
    root_dir: Path
    logs_dir: Path
    host: str = "0.0.0.0"
    port: int = 3000
    api_base: str = DEFAULT_API_BASE
    api_email: str | None = None
    api_token: str | None = None
    api_timeout_sec: float = 30.0
    order_notes: str = DEFAULT_ORDER_NOTES
    render_timeout_ms: int = 30_000
    render_settle_ms: int = 3_000
    render_user_agent: str = DEFAULT_USER_AGENT
    render_headless: bool = True

    @classmethod
    def load(cls, base_dir: Path | None = None) -> Settings:
        load_dotenv(override=False)

        root_env = os.getenv("WORKORDER_HOME")
        root_dir = Path(root_env).expanduser().resolve() if root_env else (base_dir or Path.cwd()).resolve()
        logs_dir = Path(os.getenv("WORKORDER_LOG_DIR", root_dir / "logs")).expanduser().resolve()

        return cls(
            root_dir=root_dir,
            logs_dir=logs_dir,
            host=os.getenv("WORKORDER_HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            api_base=os.getenv("PRINTAVO_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            api_email=os.getenv("PRINTAVO_EMAIL") or None,
            api_token=os.getenv("PRINTAVO_TOKEN") or None,
            api_timeout_sec=float(os.getenv("PRINTAVO_TIMEOUT_SEC", "30")),
            order_notes=os.getenv("WORKORDER_ORDER_NOTES", DEFAULT_ORDER_NOTES),
            render_timeout_ms=int(os.getenv("RENDER_TIMEOUT_MS", "30000")),
            render_settle_ms=int(os.getenv("RENDER_SETTLE_MS", "3000")),
            render_user_agent=os.getenv("RENDER_USER_AGENT", DEFAULT_USER_AGENT),
            render_headless=os.getenv("RENDER_HEADLESS", "true").strip().lower() in _TRUE_VALUES,
        )

    @property
    def has_api_credentials(self) -> bool:
        return bool(self.api_email and self.api_token)

    def ensure_directories(self) -> None:
        for path in [self.root_dir, self.logs_dir]:
            path.mkdir(parents=True, exist_ok=True)
