from __future__ import annotations

import json
from pathlib import Path

import typer
from rich import print

from workorder.clients import PrintavoClient
from workorder.config import Settings
from workorder.core.logging import configure_logging, get_logger, new_correlation_id
from workorder.errors import InvalidWorkorderUrl
from workorder.services import WorkorderImportService, run_doctor_checks, validate_workorder_url
from workorder.sources.browser import PlaywrightRenderer

app = typer.Typer(no_args_is_help=True, help="Workorder CLI: перенос workorder из Printavo в свой аккаунт")

STATUS_COLORS = {"success": "green", "warning": "yellow", "error": "red", "info": "cyan"}


def _load_settings(base_dir: Path | None = None) -> Settings:
    settings = Settings.load(base_dir=base_dir)
    settings.ensure_directories()
    return settings


def _build_service(settings: Settings, name: str) -> WorkorderImportService:
    correlation_id = new_correlation_id()
    configure_logging(settings.logs_dir, correlation_id=correlation_id)
    return WorkorderImportService(
        settings=settings,
        renderer=PlaywrightRenderer.from_settings(settings),
        logger=get_logger(name, correlation_id),
    )


def _checked_url(url: str, allow_invoice: bool = False) -> str:
    try:
        return validate_workorder_url(url, allow_invoice=allow_invoice)
    except InvalidWorkorderUrl as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("serve")
def serve_command(
    host: str | None = typer.Option(None, help="Адрес (по умолчанию WORKORDER_HOST)"),
    port: int | None = typer.Option(None, help="Порт (по умолчанию PORT)"),
) -> None:
    import uvicorn

    from workorder.web import create_app

    settings = _load_settings()
    configure_logging(settings.logs_dir, correlation_id="server")
    print(f"[green]Workorder processor[/green]: http://{host or settings.host}:{port or settings.port}")
    uvicorn.run(create_app(settings), host=host or settings.host, port=port or settings.port, log_config=None)


@app.command("scrape")
def scrape_command(
    url: str = typer.Argument(..., help="URL workorder или invoice"),
    as_json: bool = typer.Option(False, "--json", help="Вывести полный JSON результата"),
) -> None:
    settings = _load_settings()
    service = _build_service(settings, "workorder.scrape")
    result = service.diagnose(_checked_url(url, allow_invoice=True))

    if as_json:
        typer.echo(json.dumps(result, ensure_ascii=False, indent=2))
        return

    if not result["success"]:
        print(f"[red]Ошибка извлечения[/red]: {result['error']}")
        raise typer.Exit(1)

    print("Анализ:")
    for key, value in result["analysis"].items():
        print(f"- {key}: {value}")
    print("Рекомендации:")
    for rec in result["recommendations"]:
        color = STATUS_COLORS.get(rec["type"], "white")
        print(f"- [{color}]{rec['type'].upper()}[/{color}] {rec['message']}")


@app.command("import")
def import_command(
    url: str = typer.Argument(..., help="URL workorder"),
    user_id: int = typer.Option(..., help="ID пользователя Printavo"),
    status_id: int = typer.Option(..., help="ID статуса заказа"),
    email: str | None = typer.Option(None, help="Email Printavo (по умолчанию PRINTAVO_EMAIL)"),
    token: str | None = typer.Option(None, help="API token (по умолчанию PRINTAVO_TOKEN)"),
) -> None:
    settings = _load_settings()
    api_email = email or settings.api_email
    api_token = token or settings.api_token
    if not api_email or not api_token:
        raise typer.BadParameter("Нужны --email/--token или PRINTAVO_EMAIL/PRINTAVO_TOKEN")

    checked_url = _checked_url(url)
    service = _build_service(settings, "workorder.import")
    client = PrintavoClient(
        email=api_email,
        token=api_token,
        base_url=settings.api_base,
        timeout_sec=settings.api_timeout_sec,
    )
    result = service.process(checked_url, user_id=user_id, status_id=status_id, client=client)

    if not result["success"]:
        print(f"[red]Импорт не выполнен[/red]: {result['error']}")
        raise typer.Exit(1)
    print(f"[green]Импорт завершен[/green]. {result['message']}")


@app.command("doctor")
def doctor_command() -> None:
    settings = _load_settings()
    checks = run_doctor_checks(settings)

    print("Результаты doctor:")
    for check in checks:
        status = check["status"].upper()
        print(f"- [{status}] {check['check']}: {check['detail']}")


if __name__ == "__main__":
    app()
