def _load(container, make_xlsx):
    rows = [
        {"hilan_employee_id": 1, "hilan_last_name": "Cohen", "hilan_first_name": "Avi"},
        {"hilan_employee_id": 2, "hilan_last_name": "Levi", "hilan_first_name": "Dana"},
        {"hilan_employee_id": 3, "hilan_last_name": "Mizrahi", "hilan_first_name": "Noa"},
    ]
    container.import_service.import_file(str(make_xlsx("hilan_staff.xlsx", rows)))


def test_search_matches_any_search_column(container, make_xlsx):
    _load(container, make_xlsx)

    by_first_name = container.employee_service.search("hilan", "Dana")
    by_id = container.employee_service.search("hilan", "3")

    assert [e["hilan_employee_id"] for e in by_first_name.employees] == [2]
    assert [e["hilan_employee_id"] for e in by_id.employees] == [3]


def test_search_sorts_and_pages(container, make_xlsx):
    _load(container, make_xlsx)

    page = container.employee_service.search("hilan", page=1, page_size=2, sort_field="hilan_last_name", sort_order="DESC")

    assert page.total == 3
    assert page.total_pages == 2
    assert [e["hilan_last_name"] for e in page.employees] == ["Mizrahi", "Levi"]


def test_details_of_missing_employee_is_none(container):
    assert container.employee_service.get_details("sap", 42) is None


def test_paging_over_equal_sort_values_covers_every_row_once(container, make_xlsx):
    rows = [{"sap_employee_id": i, "sap_name": f"E{i}", "sap_department": "Nursing"} for i in range(1, 8)]
    container.import_service.import_file(str(make_xlsx("sap_staff.xlsx", rows)))

    seen = []
    for page in (1, 2, 3):
        result = container.employee_service.search("sap", page=page, page_size=3, sort_field="sap_department")
        seen.extend(e["sap_employee_id"] for e in result.employees)

    assert seen == [1, 2, 3, 4, 5, 6, 7]


def test_like_wildcards_in_query_match_literally(container, make_xlsx):
    rows = [
        {"sap_employee_id": 1, "sap_name": "Cohen_A"},
        {"sap_employee_id": 2, "sap_name": "CohenXA"},
        {"sap_employee_id": 3, "sap_name": "100% Levi"},
    ]
    container.import_service.import_file(str(make_xlsx("sap_staff.xlsx", rows)))

    underscore = container.employee_service.search("sap", "n_A")
    percent = container.employee_service.search("sap", "%")

    assert [e["sap_employee_id"] for e in underscore.employees] == [1]
    assert [e["sap_employee_id"] for e in percent.employees] == [3]
