import pytest

from src.hr_portal.hr_portal.core.exceptions import DataAccessError, NotFoundError, ValidationError


@pytest.fixture
def employees(container, make_xlsx):
    container.import_service.import_file(str(make_xlsx("sap_staff.xlsx", [{"sap_employee_id": 1001, "sap_name": "A. Cohen"}])))
    container.import_service.import_file(str(make_xlsx("hilan_staff.xlsx", [{"hilan_employee_id": 5, "hilan_last_name": "Levi"}])))
    return container


def _infotype_rows(container) -> list[tuple]:
    with container.conn.lock:
        cur = container.conn.connect().execute(
            "SELECT transaction_id, infotype_code, population FROM sap_transaction_infotypes ORDER BY id"
        )
        return [tuple(r) for r in cur.fetchall()]


def test_transaction_update_replaces_all_infotypes(employees):
    svc = employees.transaction_service
    tx_id = svc.add_transaction(1001, "PA20")
    svc.update_transaction(
        tx_id,
        transaction_code="PA20",
        infotypes=[{"infotype_code": "0001", "population": "all"}, {"infotype_code": "0002"}],
    )

    updated = svc.update_transaction(tx_id, transaction_code="PA30", infotypes=[{"infotype_code": "0008", "population": "nurses"}])

    assert updated.transaction_code == "PA30"
    assert [(i.infotype_code, i.population) for i in updated.infotypes] == [("0008", "nurses")]
    assert _infotype_rows(employees) == [(tx_id, "0008", "nurses")]


def test_transaction_update_with_empty_list_clears_children(employees):
    svc = employees.transaction_service
    tx_id = svc.add_transaction(1001, "PA20")
    svc.update_transaction(tx_id, transaction_code="PA20", infotypes=[{"infotype_code": "0001"}])

    updated = svc.update_transaction(tx_id, transaction_code="PA20", infotypes=[])

    assert updated.infotypes == []
    assert _infotype_rows(employees) == []


def test_invalid_child_leaves_previous_children(employees):
    svc = employees.transaction_service
    tx_id = svc.add_transaction(1001, "PA20")
    svc.update_transaction(tx_id, transaction_code="PA20", infotypes=[{"infotype_code": "0001"}])

    with pytest.raises(ValidationError):
        svc.update_transaction(tx_id, transaction_code="PA20", infotypes=[{"infotype_code": ""}])

    assert [i.infotype_code for i in svc.list_transactions(1001)[0].infotypes] == ["0001"]


def test_delete_transaction_removes_children(employees):
    svc = employees.transaction_service
    tx_id = svc.add_transaction(1001, "PA20")
    svc.update_transaction(tx_id, transaction_code="PA20", infotypes=[{"infotype_code": "0001"}])

    svc.delete_transaction(tx_id)

    assert svc.list_transactions(1001) == []
    assert _infotype_rows(employees) == []
    with pytest.raises(NotFoundError):
        svc.delete_transaction(tx_id)


def test_transaction_for_unknown_employee_is_refused(employees):
    with pytest.raises(DataAccessError):
        employees.transaction_service.add_transaction(9999, "PA20")


def test_update_unknown_transaction_is_not_found(employees):
    with pytest.raises(NotFoundError):
        employees.transaction_service.update_transaction(77, transaction_code="PA20", infotypes=[])


def test_permission_update_replaces_all_systems(employees):
    svc = employees.permission_service
    perm_id = svc.add_permission(5, "Payroll viewer")
    svc.add_system(perm_id, name="Hilan Net", permission_type="read", population="all")
    svc.add_system(perm_id, name="Hilan Pay", permission_type="write")

    updated = svc.update_permission(
        perm_id,
        name="Payroll editor",
        systems=[{"name": "Hilan Pay", "permissionType": "write", "population": "nurses"}],
    )

    assert updated.name == "Payroll editor"
    assert updated.to_dict()["systems"] == [
        {"id": updated.systems[0].id, "name": "Hilan Pay", "permissionType": "write", "population": "nurses"}
    ]
    assert [p.to_dict()["systems"] for p in svc.list_permissions(5)] == [updated.to_dict()["systems"]]


def test_add_system_to_missing_permission_is_not_found(employees):
    with pytest.raises(NotFoundError):
        employees.permission_service.add_system(123, name="Hilan Net")


def test_delete_permission(employees):
    svc = employees.permission_service
    perm_id = svc.add_permission(5, "Payroll viewer")
    svc.add_system(perm_id, name="Hilan Net")

    svc.delete_permission(perm_id)

    assert svc.list_permissions(5) == []
