from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

import tripdesk.presentation.routers as routers
from tripdesk.core.exceptions import StorageUnavailableError
from tripdesk.presentation.exception_handlers import register_exception_handlers
from tripdesk.schemas.models import Reservation


class _DummyDB:
    """A minimal stand-in for a SQLAlchemy Session (we never call it in router tests)."""


@pytest.fixture()
def app() -> FastAPI:
    """
    Build a tiny FastAPI app with ONLY the router under test.

    We override the DB dependency so tests don't touch the real SessionLocal / SQLite.
    """
    test_app = FastAPI()
    test_app.include_router(routers.router)
    register_exception_handlers(test_app)

    def _override_get_db():
        yield _DummyDB()

    test_app.dependency_overrides[routers.get_db] = _override_get_db
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def _reservation(reservation_id: int = 1, **overrides: Any) -> Reservation:
    base = {
        "id": reservation_id,
        "member_name": "Ana",
        "destination": "Lisbon",
        "start_date": date(2026, 3, 1),
        "end_date": date(2026, 3, 10),
        "status": "pending",
    }
    base.update(overrides)
    return Reservation(**base)


def _payload(**overrides: Any) -> dict[str, Any]:
    base = {
        "memberName": "Ana",
        "destination": "Lisbon",
        "startDate": "2026-03-01",
        "endDate": "2026-03-10",
        "status": "pending",
    }
    base.update(overrides)
    return base


def test_list_returns_camel_case_json(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(routers, "list_reservations_service", lambda db: [_reservation(1), _reservation(2)])

    r = client.get("/api/reservations")
    assert r.status_code == 200
    assert r.json()[0] == {
        "id": 1,
        "memberName": "Ana",
        "destination": "Lisbon",
        "startDate": "2026-03-01",
        "endDate": "2026-03-10",
        "status": "pending",
    }
    assert [item["id"] for item in r.json()] == [1, 2]


def test_list_storage_unavailable_maps_to_503(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_list_reservations_service(db):
        raise StorageUnavailableError()

    monkeypatch.setattr(routers, "list_reservations_service", _fake_list_reservations_service)

    r = client.get("/api/reservations")
    assert r.status_code == 503
    assert r.json()["detail"] == "Storage unavailable"


def test_get_reservation_200(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(routers, "get_reservation_service", lambda reservation_id, db: _reservation(reservation_id))

    r = client.get("/api/reservations/7")
    assert r.status_code == 200
    assert r.json()["id"] == 7


def test_get_reservation_not_found_maps_to_404(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_get_reservation_service(reservation_id: int, db):
        raise routers.NotFoundError("Reservation not found")

    monkeypatch.setattr(routers, "get_reservation_service", _fake_get_reservation_service)

    r = client.get("/api/reservations/404")
    assert r.status_code == 404
    assert r.json()["detail"] == "Reservation not found"


def test_get_reservation_non_integer_id_returns_422(client: TestClient) -> None:
    r = client.get("/api/reservations/abc")
    assert r.status_code == 422


def test_post_reservation_returns_201_with_location(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    def _fake_create_reservation_service(body, db):
        seen["body"] = body
        return _reservation(12, member_name=body.member_name)

    monkeypatch.setattr(routers, "create_reservation_service", _fake_create_reservation_service)

    r = client.post("/api/reservations", json=_payload(memberName="Bea"))
    assert r.status_code == 201
    assert r.json()["id"] == 12
    assert r.json()["memberName"] == "Bea"
    assert r.headers["location"] == "http://testserver/api/reservations/12"
    assert seen["body"].start_date == date(2026, 3, 1)


def test_post_reservation_validation_error_returns_422(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_create_reservation_service(body, db):
        raise routers.ValidationError("Unknown status: archived")

    monkeypatch.setattr(routers, "create_reservation_service", _fake_create_reservation_service)

    r = client.post("/api/reservations", json=_payload(status="archived"))
    assert r.status_code == 422
    assert r.json()["detail"] == "Unknown status: archived"


@pytest.mark.parametrize(
    "body",
    [
        {k: v for k, v in _payload().items() if k != "memberName"},
        {k: v for k, v in _payload().items() if k != "destination"},
        {k: v for k, v in _payload().items() if k != "startDate"},
        {k: v for k, v in _payload().items() if k != "endDate"},
        _payload(memberName=""),
        _payload(destination=""),
        _payload(startDate="not-a-date"),
    ],
)
def test_post_reservation_schema_violations_return_422(client: TestClient, body: dict[str, Any]) -> None:
    r = client.post("/api/reservations", json=body)
    assert r.status_code == 422
    assert any(err.get("loc", [None])[0] == "body" for err in r.json()["detail"])


def test_put_reservation_returns_204(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    def _fake_update_reservation_service(reservation_id: int, body, db):
        seen["id"] = reservation_id
        seen["body"] = body

    monkeypatch.setattr(routers, "update_reservation_service", _fake_update_reservation_service)

    r = client.put("/api/reservations/3", json=_payload(status="confirmed"))
    assert r.status_code == 204
    assert r.content == b""
    assert seen["id"] == 3
    assert seen["body"].status == "confirmed"


def test_put_reservation_not_found_maps_to_404(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_update_reservation_service(reservation_id: int, body, db):
        raise routers.NotFoundError("Reservation not found")

    monkeypatch.setattr(routers, "update_reservation_service", _fake_update_reservation_service)

    r = client.put("/api/reservations/3", json=_payload())
    assert r.status_code == 404


def test_delete_reservation_returns_204(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(routers, "delete_reservation_service", lambda reservation_id, db: None)

    r = client.delete("/api/reservations/3")
    assert r.status_code == 204
    assert r.content == b""


def test_delete_reservation_not_found_maps_to_404(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_delete_reservation_service(reservation_id: int, db):
        raise routers.NotFoundError("Reservation not found")

    monkeypatch.setattr(routers, "delete_reservation_service", _fake_delete_reservation_service)

    r = client.delete("/api/reservations/3")
    assert r.status_code == 404
    assert r.json()["detail"] == "Reservation not found"
