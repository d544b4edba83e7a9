from __future__ import annotations

import pytest
import requests
from flask import session

from distribution_admin.container import build_container
from distribution_admin.main import create_app
from tests.fakes import TODAY, FakeResponse

ADMIN = {"id": "u-1", "name": "Admin", "username": "admin", "phone": "0812", "role": "SUPER_ADMIN"}

WEEK = {
    "data": [
        {"id": 1, "name": "Andi", "attendanceRecords": [{"date": "2025-06-16", "status": "PRESENT"}]},
        {"id": 2, "name": "Budi", "attendanceRecords": [{"date": "2025-06-16", "status": "LEAVE"}]},
    ]
}


@pytest.fixture()
def container(fake_session):
    return build_container(
        api_config={"base_url": "http://backend.test/api", "timeout": 5},
        token_provider=lambda: session.get("token"),
        session=fake_session,
        today_provider=lambda: TODAY,
    )


@pytest.fixture()
def client(monkeypatch, container, fake_session):
    monkeypatch.setenv("APP_ENV", "testing")
    fake_session.add("POST", "login", FakeResponse(200, {"data": ADMIN, "token": "tok-1"}))
    fake_session.add("GET", "attendance", FakeResponse(200, WEEK))
    app = create_app(container=container)
    return app.test_client()


@pytest.fixture()
def logged_in(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "rahasia"})
    assert resp.status_code == 200
    return client


def test_requires_login(client):
    resp = client.get("/api/attendance/editor")

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Silakan login terlebih dahulu"


def test_login_and_current_forward_token(logged_in, fake_session):
    fake_session.add("GET", "current", FakeResponse(200, {"data": ADMIN}))

    resp = logged_in.get("/api/current")

    assert resp.get_json()["data"]["username"] == "admin"
    assert fake_session.calls[-1]["headers"]["Authorization"] == "tok-1"


def test_wrong_password(client, fake_session):
    fake_session.add("POST", "login", FakeResponse(401, {"message": "invalid credentials"}))

    resp = client.post("/api/login", json={"username": "admin", "password": "salah123"})

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Username atau password salah"


def test_editor_edit_and_save(logged_in, fake_session):
    fake_session.add("POST", "attendance/batch", FakeResponse(200, {"message": "Tersimpan"}))

    view = logged_in.get("/api/attendance/editor?anchor=2025-06-18").get_json()["data"]
    assert view["mode"] == "view"
    assert view["week"] == {"start": "2025-06-15", "end": "2025-06-21", "label": "2025-06-15 - 2025-06-21"}
    assert [c["date"] for c in view["columns"]] == [
        "2025-06-15",
        "2025-06-16",
        "2025-06-17",
        "2025-06-18",
        "2025-06-19",
        "2025-06-21",
    ]
    assert view["rows"][1]["cells"][1] == {"date": "2025-06-16", "value": "LEAVE", "label": "Izin"}
    assert view["form"] is None

    edit = logged_in.post("/api/attendance/editor/edit").get_json()["data"]
    assert edit["mode"] == "edit"
    assert list(edit["form"]["dates"]) == ["2025-06-16"]

    logged_in.post("/api/attendance/editor/dates/2025-06-18/activate")
    toggled = logged_in.post("/api/attendance/editor/dates/2025-06-18/employees/1/toggle").get_json()["data"]
    assert toggled["form"]["dates"]["2025-06-18"]["employees"][0]["status"] == "LEAVE"

    resp = logged_in.post("/api/attendance/editor/save")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["message"] == "Tersimpan"
    assert body["data"]["mode"] == "view"
    sent = [c for c in fake_session.calls if c["url"].endswith("/attendance/batch")][0]["json"]
    assert [op["date"] for op in sent["attendances"]] == ["2025-06-16", "2025-06-18"]


def test_save_validation_error_stays_in_edit(logged_in):
    logged_in.get("/api/attendance/editor?anchor=2025-06-18")
    logged_in.post("/api/attendance/editor/edit")
    logged_in.post("/api/attendance/editor/dates/2025-06-18/activate")
    for _ in range(4):
        logged_in.post("/api/attendance/editor/dates/2025-06-18/employees/2/toggle")

    resp = logged_in.post("/api/attendance/editor/save")

    assert resp.status_code == 400
    assert "2025-06-18" in resp.get_json()["message"]
    assert logged_in.get("/api/attendance/editor").get_json()["data"]["mode"] == "edit"


def test_deactivate_persisted_date_needs_confirmation(logged_in):
    logged_in.get("/api/attendance/editor?anchor=2025-06-18")
    logged_in.post("/api/attendance/editor/edit")

    resp = logged_in.post("/api/attendance/editor/dates/2025-06-16/deactivate", json={})
    assert resp.status_code == 409
    assert resp.get_json()["confirmRequired"] is True

    resp = logged_in.post("/api/attendance/editor/dates/2025-06-16/deactivate", json={"confirm": True})
    employees = resp.get_json()["data"]["form"]["dates"]["2025-06-16"]["employees"]
    assert all(e["status"] is None for e in employees)


def test_navigation_locked_while_editing(logged_in):
    logged_in.get("/api/attendance/editor?anchor=2025-06-18")
    logged_in.post("/api/attendance/editor/edit")

    resp = logged_in.post("/api/attendance/editor/previous")

    assert resp.status_code == 400

    logged_in.post("/api/attendance/editor/cancel")
    data = logged_in.post("/api/attendance/editor/previous").get_json()["data"]
    assert data["week"]["start"] == "2025-06-08"


def test_expired_backend_token_ends_session(logged_in, fake_session):
    fake_session.add("GET", "attendance", FakeResponse(401, {"message": "Unauthorized"}))

    resp = logged_in.get("/api/attendance/editor?refresh=1")
    assert resp.status_code == 401

    assert logged_in.get("/api/attendance/editor").status_code == 401


def test_logout_drops_editor(logged_in, container):
    logged_in.get("/api/attendance/editor")
    assert len(container.editors) == 1

    logged_in.post("/api/logout")

    assert len(container.editors) == 0
    assert logged_in.get("/api/employees").status_code == 401


def test_employee_list_forwards_paging(logged_in, fake_session):
    fake_session.add(
        "GET",
        "employees",
        FakeResponse(
            200,
            {
                "data": [{"id": 3, "name": "Eko", "salary": 3500000, "role": "DRIVER", "supervisorId": 1}],
                "paging": {"page": 1, "perPage": 5, "totalItems": 1, "totalPages": 1},
            },
        ),
    )

    body = logged_in.get("/api/employees?perPage=5&roles=DRIVER").get_json()

    assert body["data"][0]["supervisorId"] == 1
    assert body["paging"]["perPage"] == 5
    assert fake_session.calls[-1]["params"] == {"page": 1, "perPage": 5, "roles": ["DRIVER"]}


def test_employee_create_validation(logged_in):
    resp = logged_in.post("/api/employees", json={"name": "Eko", "salary": 100, "role": "HELPER"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Supervisor tidak valid"


def test_vehicle_create_normalizes_plate(logged_in, fake_session):
    fake_session.add("POST", "vehicles", FakeResponse(201, {"data": True}))

    resp = logged_in.post("/api/vehicles", json={"plate": "b 1234 xy", "type": "TRUCK"})

    assert resp.status_code == 201
    assert resp.get_json()["message"] == "Kendaraan berhasil ditambahkan"
    assert fake_session.calls[-1]["json"] == {"plate": "B1234XY", "type": "TRUCK"}


def test_vehicle_list_type_filter(logged_in, fake_session):
    fake_session.add("GET", "vehicles", FakeResponse(200, {"data": [{"id": 1, "plate": "B1", "type": "PICKUP"}]}))

    body = logged_in.get("/api/vehicles?types[]=PICKUP").get_json()

    assert body == {"data": [{"id": 1, "plate": "B1", "type": "PICKUP"}]}
    assert fake_session.calls[-1]["params"]["types[]"] == ["PICKUP"]


def test_cannot_delete_own_account(logged_in):
    resp = logged_in.delete("/api/users/u-1")

    assert resp.status_code == 403


def test_login_again_drops_previous_editor(logged_in, container):
    logged_in.get("/api/attendance/editor")

    logged_in.post("/api/login", json={"username": "admin", "password": "rahasia"})
    logged_in.get("/api/attendance/editor")

    assert len(container.editors) == 1


def test_expired_backend_token_drops_editor(logged_in, container, fake_session):
    logged_in.get("/api/attendance/editor")
    assert len(container.editors) == 1

    fake_session.add("GET", "attendance", FakeResponse(401, {"message": "Unauthorized"}))
    logged_in.get("/api/attendance/editor?refresh=1")

    assert len(container.editors) == 0


def test_save_reports_success_when_refetch_fails(logged_in, fake_session):
    fake_session.add("POST", "attendance/batch", FakeResponse(200, {"message": "Tersimpan"}))

    def week_until_saved():
        if any(c["url"].endswith("/attendance/batch") for c in fake_session.calls):
            return requests.ConnectionError("refused")
        return FakeResponse(200, WEEK)

    fake_session.add("GET", "attendance", week_until_saved)
    logged_in.get("/api/attendance/editor?anchor=2025-06-18")
    logged_in.post("/api/attendance/editor/edit")
    logged_in.post("/api/attendance/editor/dates/2025-06-18/activate")

    resp = logged_in.post("/api/attendance/editor/save")

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Tersimpan", "data": None}
    assert logged_in.get("/api/attendance/editor").status_code == 502
