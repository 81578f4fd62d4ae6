import csv
import io

import openpyxl

from smartres_api.services import bulk_import as bi


def _xlsx(kind, *rows):
    headers, sample = bi.TEMPLATES[kind]
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(headers)
    ws.append(sample)
    for r in rows:
        ws.append(r)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def test_make_avatar():
    assert bi.make_avatar("sarah jane johnson")["initials"] == "SJ"
    assert bi.make_avatar("Bo")["initials"] == "BO"
    assert bi.make_avatar("Ana")["color"] == bi.AVATAR_COLORS[ord("A") % 8]


def test_json_bulk_reports_failed_rows(client):
    rows = [
        {"name": "Sarah Johnson", "position": "Welder", "skills": "Welding, Fitting", "tier": "3"},
        {"name": "No Position"},
        {"name": "Mike Chen", "position": "Fitter", "availability": "asleep"},
        {"name": "Ana Lopez", "position": "Electrician", "isIndirect": "yes"},
    ]
    resp = client.post("/api/employees/bulk", json=rows)
    assert resp.status_code == 201
    body = resp.get_json()
    assert [r["id"] for r in body["data"]] == ["EMP001", "EMP002"]
    assert body["data"][0]["skills"] == ["Welding", "Fitting"]
    assert body["data"][0]["tier"] == 3
    assert body["data"][1]["isIndirect"] is True
    assert body["meta"]["errors"] == [
        "Row 2: Name and position are required",
        "Row 3: availability must be one of available, busy, unavailable",
    ]
    assert body["meta"]["message"] == "Successfully imported 2 employees. 2 failed."


def test_json_bulk_empty_input(client):
    assert client.post("/api/projects/bulk", json=[]).status_code == 400
    assert client.post("/api/projects/bulk", data="nope").status_code == 400


def test_json_bulk_single_object(client):
    resp = client.post(
        "/api/projects/bulk",
        json={"name": "Alpha", "startDate": "2024-01-01", "endDate": "2024-12-31"},
    )
    body = resp.get_json()
    assert body["data"][0]["id"] == "PROJ001"
    assert body["meta"]["message"] == "Successfully imported 1 project. 0 failed."


def test_upload_xlsx_skips_sample_row(client):
    data = _xlsx(
        bi.EQUIPMENT,
        ["Dozer", "Komatsu", "D61", 2018, "Site B", 90000, 60, 12],
        [None, None, None, None, None, None, None, None],
        ["Bad Row", None, "X1", 2020, "Site C", 1, 1, 1],
    )
    resp = client.post(
        "/api/equipment/bulk/upload",
        data={"file": (io.BytesIO(data), "equipment.xlsx")},
        content_type="multipart/form-data",
    )
    body = resp.get_json()
    assert [r["name"] for r in body["data"]] == ["Dozer"]
    assert body["data"][0]["year"] == 2018
    assert body["meta"]["errors"] == ["Row 2: Name, make, and model are required"]


def test_upload_csv(client):
    buf = io.StringIO()
    w = csv.writer(buf)
    headers, sample = bi.TEMPLATES[bi.PROJECT]
    w.writerow(headers)
    w.writerow(sample)
    w.writerow(["Beta", "", "2024-02-01", "2024-01-01", "", "", "", ""])
    w.writerow(["Gamma", "", "01/15/2024", "2024-03-01", "active", "LOW", "1,000", ""])
    resp = client.post(
        "/api/projects/bulk/upload",
        data={"file": (io.BytesIO(buf.getvalue().encode()), "projects.csv")},
        content_type="multipart/form-data",
    )
    body = resp.get_json()
    assert [p["name"] for p in body["data"]] == ["Gamma"]
    assert body["data"][0]["priority"] == "low"
    assert body["data"][0]["budget"] == 1000
    assert body["meta"]["errors"] == ["Row 1: End date cannot be before start date"]


def test_upload_rejects_bad_files(client):
    resp = client.post(
        "/api/employees/bulk/upload",
        data={"file": (io.BytesIO(b"hello"), "people.txt")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400

    resp = client.post(
        "/api/employees/bulk/upload",
        data={"file": (io.BytesIO(b"not a zip"), "people.xlsx")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400
    assert client.post("/api/employees/bulk/upload").status_code == 400


def test_template_download(client):
    resp = client.get("/api/employees/bulk/template")
    assert resp.status_code == 200
    wb = openpyxl.load_workbook(io.BytesIO(resp.data))
    rows = list(wb.active.iter_rows(values_only=True))
    headers, sample = bi.TEMPLATES[bi.EMPLOYEE]
    assert list(rows[0]) == headers
    assert rows[1][0] == sample[0]
    assert len(rows) == 2


def test_json_bulk_applies_the_create_limits(client):
    rows = [
        {"name": "Sarah Johnson", "position": "Welder", "utilization": 500, "wage": -10},
        {"name": "Mike Chen", "position": "Fitter", "tier": "9"},
        {"name": "Ana Lopez", "position": "Electrician", "utilization": "40"},
    ]
    resp = client.post("/api/employees/bulk", json=rows)
    assert resp.status_code == 201
    body = resp.get_json()
    assert [r["name"] for r in body["data"]] == ["Ana Lopez"]
    assert body["data"][0]["utilization"] == 40
    errors = body["meta"]["errors"]
    assert len(errors) == 2
    assert errors[0].startswith("Row 1: utilization:")
    assert "wage:" in errors[0]
    assert errors[1].startswith("Row 2: tier:")


def test_json_bulk_rejects_out_of_range_equipment_and_projects(client):
    resp = client.post("/api/equipment/bulk", json=[
        {"name": "Crane", "make": "Liebherr", "model": "LTM", "depreciationRate": 250},
    ])
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["data"] == []
    assert body["meta"]["errors"][0].startswith("Row 1: depreciationRate:")

    resp = client.post("/api/projects/bulk", json=[
        {"name": "Alpha", "startDate": "2024-01-01", "endDate": "2024-12-31", "progress": 150},
    ])
    assert resp.get_json()["meta"]["errors"][0].startswith("Row 1: progress:")
