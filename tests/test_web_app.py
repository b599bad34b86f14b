from __future__ import annotations

import pytest
from conftest import FakeClient, FakeRenderer, load_page
from fastapi.testclient import TestClient

from workorder.web import create_app

URL = "https://shop.printavo.com/work_orders/68f503de509b3a26"


@pytest.fixture()
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture()
def renderer() -> FakeRenderer:
    return FakeRenderer(load_page("table_workorder.html"))


@pytest.fixture()
def credentials() -> list[tuple[str, str]]:
    return []


@pytest.fixture()
def client(settings, renderer, fake_client, credentials) -> TestClient:  # noqa: ANN001
    def client_factory(email: str, token: str) -> FakeClient:
        credentials.append((email, token))
        return fake_client

    return TestClient(create_app(settings, renderer=renderer, client_factory=client_factory))


def _form(**overrides) -> dict:  # noqa: ANN003
    body = {
        "printavoEmail": "me@shop.com",
        "printavoToken": "secret",
        "userId": 7,
        "orderStatusId": 3,
        "workorderUrl": URL,
    }
    body.update(overrides)
    return body


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_pages_are_served(client: TestClient) -> None:
    assert "workorderForm" in client.get("/").text
    assert "testForm" in client.get("/test").text
    assert client.get("/static/app.js").status_code == 200


def test_process_workorder_success(client: TestClient, fake_client: FakeClient, credentials: list) -> None:
    response = client.post("/api/process-workorder", json=_form())

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["order"]["id"] == 9001
    assert body["workorderData"]["lineItems"][0]["sizeBuckets"] == {"m": 12}
    assert credentials == [("me@shop.com", "secret")]
    assert fake_client.customer_payloads[0]["first_name"] == "Jane"


def test_process_workorder_missing_fields(client: TestClient, renderer: FakeRenderer) -> None:
    response = client.post("/api/process-workorder", json=_form(printavoToken=""))

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Missing required fields"}
    assert renderer.opened == []


def test_process_workorder_rejects_bad_url(client: TestClient, renderer: FakeRenderer) -> None:
    response = client.post("/api/process-workorder", json=_form(workorderUrl="https://shop.printavo.com/invoice/1"))

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "work_orders/" in response.json()["error"]
    assert renderer.opened == []


def test_process_workorder_invalid_types(client: TestClient) -> None:
    response = client.post("/api/process-workorder", json=_form(userId="abc"))

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_process_workorder_failure_result(settings, fake_client) -> None:  # noqa: ANN001
    app = create_app(
        settings,
        renderer=FakeRenderer("<p>empty</p>"),
        client_factory=lambda email, token: fake_client,
    )

    response = TestClient(app).post("/api/process-workorder", json=_form())

    assert response.status_code == 200
    assert response.json()["success"] is False
    assert response.json()["error"] == "missing customer identity"


def test_unexpected_error_returns_500(settings) -> None:  # noqa: ANN001
    app = create_app(
        settings,
        renderer=FakeRenderer(error=RuntimeError("driver crashed")),
        client_factory=lambda email, token: FakeClient(),
    )

    response = TestClient(app).post("/api/test-scraper", json={"workorderUrl": URL})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error", "details": "driver crashed"}


def test_scraper_diagnostic_end_to_end(client: TestClient, fake_client: FakeClient) -> None:
    response = client.post("/api/test-scraper", json={"workorderUrl": URL})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["analysis"]["addressFound"] is False
    assert body["analysis"]["readyForImport"] is True
    assert body["normalized"]["firstName"] == "Jane"
    assert body["normalized"]["lastName"] == "Doe"
    assert fake_client.customer_payloads == []


def test_scraper_diagnostic_accepts_invoice_urls(client: TestClient) -> None:
    response = client.post("/api/test-scraper", json={"workorderUrl": "https://shop.printavo.com/invoice/55"})
    assert response.status_code == 200


def test_scraper_diagnostic_requires_url(client: TestClient) -> None:
    response = client.post("/api/test-scraper", json={})
    assert response.status_code == 400
