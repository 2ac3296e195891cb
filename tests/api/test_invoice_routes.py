"""Tests for invoice collection endpoints."""

import json
from datetime import date

from fastapi.testclient import TestClient

from invoicekit.config import Settings


def test_list_invoices_empty(client: TestClient):
    response = client.get("/api/invoices")

    assert response.status_code == 200
    assert response.json() == {"invoices": []}


def test_save_then_list(client: TestClient, sample_invoice):
    record = sample_invoice.to_record()

    response = client.post("/api/invoices", json=record)

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert client.get("/api/invoices").json()["invoices"] == [record]


def test_save_replaces_by_id(client: TestClient):
    client.post("/api/invoices", json={"id": "A1", "summary": "one"})
    client.post("/api/invoices", json={"id": "A1", "summary": "two"})

    assert client.get("/api/invoices").json()["invoices"] == [{"id": "A1", "summary": "two"}]


def test_save_without_id_is_rejected(client: TestClient):
    response = client.post("/api/invoices", json={"summary": "no id"})

    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert body["path"] == "/api/invoices"


def test_delete_invoice(client: TestClient):
    client.post("/api/invoices", json={"id": "A1"})
    client.post("/api/invoices", json={"id": "B2"})

    response = client.delete("/api/invoices/A1")

    assert response.status_code == 200
    assert client.get("/api/invoices").json()["invoices"] == [{"id": "B2"}]


def test_delete_encoded_id(client: TestClient):
    client.post("/api/invoices", json={"id": "2024/07"})

    response = client.delete("/api/invoices/2024%2F07")

    assert response.status_code == 200
    assert client.get("/api/invoices").json()["invoices"] == []


def test_bulk_delete(client: TestClient):
    client.post("/api/invoices/import", json={"invoices": [{"id": "a"}, {"id": "b"}, {"id": "c"}]})

    response = client.post("/api/invoices/bulk-delete", json={"ids": ["a", "c"]})

    assert response.status_code == 200
    assert client.get("/api/invoices").json()["invoices"] == [{"id": "b"}]


def test_bulk_delete_requires_list(client: TestClient):
    response = client.post("/api/invoices/bulk-delete", json={"ids": "a"})
    assert response.status_code == 400


def test_import_replaces_collection(client: TestClient):
    client.post("/api/invoices", json={"id": "old"})

    response = client.post("/api/invoices/import", json={"invoices": [{"id": "n1"}, {"id": "n2"}]})

    assert response.status_code == 200
    assert [inv["id"] for inv in client.get("/api/invoices").json()["invoices"]] == ["n1", "n2"]


def test_import_requires_list(client: TestClient):
    response = client.post("/api/invoices/import", json={"invoices": {"id": "x"}})
    assert response.status_code == 400


def test_default_date_is_today(client: TestClient):
    response = client.get("/api/date")

    assert response.status_code == 200
    assert response.json() == {"date": date.today().strftime("%m-%d-%Y")}


def test_stored_date(client: TestClient, isolated_settings: Settings):
    isolated_settings.storage.date_path.write_text(json.dumps({"date": "12-31-2023"}))

    assert client.get("/api/date").json() == {"date": "12-31-2023"}


def test_health(client: TestClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Request-ID" in response.headers


def test_writes_after_importing_non_objects(client: TestClient):
    client.post("/api/invoices/import", json={"invoices": ["junk", {"id": "a"}]})

    assert client.post("/api/invoices", json={"id": "b"}).status_code == 200
    assert client.delete("/api/invoices/a").status_code == 200
    assert client.get("/api/invoices").json()["invoices"] == ["junk", {"id": "b"}]
