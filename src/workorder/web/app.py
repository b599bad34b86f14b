from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from workorder.clients import PrintavoClient
from workorder.config import Settings
from workorder.core.logging import get_logger, new_correlation_id
from workorder.errors import InvalidWorkorderUrl
from workorder.services import WorkorderImportService, validate_workorder_url
from workorder.services.importer import Renderer
from workorder.sources.browser import PlaywrightRenderer

STATIC_DIR = Path(__file__).parent / "static"

ClientFactory = Callable[[str, str], PrintavoClient]


class ProcessWorkorderRequest(BaseModel):
    printavoEmail: str | None = None
    printavoToken: str | None = None
    userId: int | None = None
    orderStatusId: int | None = None
    workorderUrl: str | None = None


class TestScraperRequest(BaseModel):
    workorderUrl: str | None = None


def _bad_request(error: str, details: Any = None) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=400, content=content)


def _internal_error(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error", "details": str(exc)},
    )


def create_app(
    settings: Settings | None = None,
    renderer: Renderer | None = None,
    client_factory: ClientFactory | None = None,
) -> FastAPI:
    settings = settings or Settings.load()
    renderer = renderer or PlaywrightRenderer.from_settings(settings)

    if client_factory is None:

        def client_factory(email: str, token: str) -> PrintavoClient:
            return PrintavoClient(
                email=email,
                token=token,
                base_url=settings.api_base,
                timeout_sec=settings.api_timeout_sec,
            )

    app = FastAPI(title="Workorder Processor")
    app.state.settings = settings
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    def _service(url: str) -> WorkorderImportService:
        logger = get_logger("workorder.web", new_correlation_id(), workorder_url=url)
        return WorkorderImportService(settings=settings, renderer=renderer, logger=logger)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _bad_request("Invalid request body", details=str(exc))

    @app.get("/")
    def index() -> FileResponse:
        return FileResponse(STATIC_DIR / "index.html")

    @app.get("/test")
    def test_page() -> FileResponse:
        return FileResponse(STATIC_DIR / "test.html")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.post("/api/process-workorder")
    def process_workorder(body: ProcessWorkorderRequest) -> Any:
        email = body.printavoEmail or settings.api_email
        token = body.printavoToken or settings.api_token
        if not email or not token or not body.userId or not body.orderStatusId or not body.workorderUrl:
            return _bad_request("Missing required fields")

        try:
            url = validate_workorder_url(body.workorderUrl)
        except InvalidWorkorderUrl as exc:
            return _bad_request(str(exc))

        service = _service(url)
        try:
            return service.process(
                url,
                user_id=body.userId,
                status_id=body.orderStatusId,
                client=client_factory(email, token),
            )
        except Exception as exc:  # noqa: BLE001
            service.logger.exception("API error: %s", exc)
            return _internal_error(exc)

    @app.post("/api/test-scraper")
    def test_scraper(body: TestScraperRequest) -> Any:
        if not body.workorderUrl:
            return _bad_request("Missing required fields")

        try:
            url = validate_workorder_url(body.workorderUrl, allow_invoice=True)
        except InvalidWorkorderUrl as exc:
            return _bad_request(str(exc))

        service = _service(url)
        try:
            return service.diagnose(url)
        except Exception as exc:  # noqa: BLE001
            service.logger.exception("Diagnostic error: %s", exc)
            return _internal_error(exc)

    return app
