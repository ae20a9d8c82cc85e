import pytest

import config.testing as testing_settings
from src.hr_portal.hr_portal.main import create_app


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setattr(testing_settings, "DB_PATH", str(tmp_path / "api.db"))
    app = create_app("config.testing")
    yield app
    app.extensions["hr_portal"].conn.close()


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, username="admin", password="admin123") -> str:
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200
    return resp.get_json()["token"]


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_bootstrap_admin_can_log_in_and_verify(client):
    token = _login(client)

    resp = client.post("/api/auth/verify", json={"token": token})

    assert resp.get_json() == {"success": True, "user": {"id": 1, "username": "admin", "role": "admin"}}


def test_wrong_password_is_401_with_generic_message(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "error": "Invalid username or password"}


def test_protected_route_requires_token(client):
    resp = client.get("/api/employees/sap/search")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_logout_revokes_token(client):
    token = _login(client)

    assert client.post("/api/auth/logout", headers=_auth(token)).status_code == 200

    assert client.get("/api/employees/sap/search", headers=_auth(token)).status_code == 401
    assert client.post("/api/auth/verify", json={"token": token}).status_code == 401


def test_user_management_is_admin_only(client):
    admin = _login(client)
    created = client.post(
        "/api/users", json={"username": "noa", "password": "secret1", "role": "user"}, headers=_auth(admin)
    )
    assert created.status_code == 201

    user_token = _login(client, "noa", "secret1")

    assert client.get("/api/users", headers=_auth(user_token)).status_code == 403
    names = [u["username"] for u in client.get("/api/users", headers=_auth(admin)).get_json()["users"]]
    assert names == ["admin", "noa"]


def test_search_validation_errors_are_400(client):
    token = _login(client)

    resp = client.get("/api/employees/sap/search?sort_field=password", headers=_auth(token))

    assert resp.status_code == 400
    assert "not allowed" in resp.get_json()["error"]


def test_search_returns_paging_payload(client):
    token = _login(client)

    body = client.get("/api/employees/hilan/search?page=1&page_size=5", headers=_auth(token)).get_json()

    assert body == {"success": True, "employees": [], "total": 0, "page": 1, "pageSize": 5, "totalPages": 0}


def test_missing_employee_is_404(client):
    token = _login(client)

    assert client.get("/api/employees/sap/1001", headers=_auth(token)).status_code == 404
    assert client.get("/api/employees/sap/1001/compare/hilan", headers=_auth(token)).status_code == 404


def test_import_publishes_progress_for_caller(client, make_xlsx):
    token = _login(client)
    path = make_xlsx("sap_march.xlsx", [{"sap_employee_id": 1001, "sap_name": "A. Cohen"}])

    resp = client.post("/api/imports", json={"filePath": str(path)}, headers=_auth(token))

    assert resp.get_json() == {
        "success": True,
        "message": "Data loaded successfully into sap_employees",
        "table": "sap_employees",
        "rows": 1,
    }
    progress = client.get("/api/imports/progress", headers=_auth(token)).get_json()["progress"]
    assert progress["step"] == "complete"

    detail = client.get("/api/employees/sap/1001", headers=_auth(token)).get_json()
    assert detail["employee"]["sap_name"] == "A. Cohen"


def test_ambiguous_import_is_400(client, make_xlsx):
    token = _login(client)
    path = make_xlsx("hilan_attendance.xlsx", [{"hilan_employee_id": 1, "date": "2024-01-01"}])

    resp = client.post("/api/imports", json={"filePath": str(path)}, headers=_auth(token))

    assert resp.status_code == 400
    assert "choose a target" in resp.get_json()["error"]


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "error": "Not found"}


def test_transaction_update_without_infotype_list_keeps_children(client, make_xlsx):
    token = _login(client)
    client.post(
        "/api/imports",
        json={"filePath": str(make_xlsx("sap_staff.xlsx", [{"sap_employee_id": 1001, "sap_name": "A. Cohen"}]))},
        headers=_auth(token),
    )
    tx_id = client.post(
        "/api/employees/sap/1001/transactions", json={"transactionCode": "PA20"}, headers=_auth(token)
    ).get_json()["id"]
    client.put(
        f"/api/transactions/{tx_id}",
        json={"transaction_code": "PA20", "infotypes": [{"infotype_code": "0001"}]},
        headers=_auth(token),
    )

    resp = client.put(f"/api/transactions/{tx_id}", json={"transaction_code": "PA30"}, headers=_auth(token))

    assert resp.status_code == 400
    listed = client.get("/api/employees/sap/1001/transactions", headers=_auth(token)).get_json()["transactions"]
    assert listed[0]["transaction_code"] == "PA20"
    assert [i["infotype_code"] for i in listed[0]["infotypes"]] == ["0001"]


def test_permission_update_without_system_list_keeps_children(client, make_xlsx):
    token = _login(client)
    client.post(
        "/api/imports",
        json={"filePath": str(make_xlsx("hilan_staff.xlsx", [{"hilan_employee_id": 5, "hilan_last_name": "Levi"}]))},
        headers=_auth(token),
    )
    perm_id = client.post(
        "/api/employees/hilan/5/permissions", json={"permissionName": "Payroll viewer"}, headers=_auth(token)
    ).get_json()["id"]
    client.post(f"/api/permissions/{perm_id}/systems", json={"systemName": "Hilan Net"}, headers=_auth(token))

    resp = client.put(f"/api/permissions/{perm_id}", json={"name": "Payroll editor"}, headers=_auth(token))

    assert resp.status_code == 400
    listed = client.get("/api/employees/hilan/5/permissions", headers=_auth(token)).get_json()["permissions"]
    assert listed[0]["name"] == "Payroll viewer"
    assert [s["name"] for s in listed[0]["systems"]] == ["Hilan Net"]


def test_corrupt_workbook_import_is_400_with_cause(client, tmp_path):
    token = _login(client)
    path = tmp_path / "sap_corrupt.xlsx"
    path.write_text("not a workbook", encoding="utf-8")

    resp = client.post("/api/imports", json={"filePath": str(path)}, headers=_auth(token))

    assert resp.status_code == 400
    assert "sap_corrupt.xlsx" in resp.get_json()["error"]


def test_attendance_route_validates_range(client):
    token = _login(client)

    ok_resp = client.get("/api/attendance/5?start=2024-01-01&end=2024-01-31", headers=_auth(token))
    bad_resp = client.get("/api/attendance/5?start=2024-02-01&end=2024-01-31", headers=_auth(token))

    assert ok_resp.get_json() == {"success": True, "attendance": []}
    assert bad_resp.status_code == 400
