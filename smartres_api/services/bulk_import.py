from __future__ import annotations

import csv
import io
import logging
from datetime import date
from typing import Any, Callable, Dict, List, Tuple

import openpyxl
from pydantic import ValidationError

from smartres_api.common.dates import parse_date
from smartres_api.common.errors import validation_errors
from smartres_api.extensions import db
from smartres_api.models.employee import Employee
from smartres_api.models.equipment import Equipment
from smartres_api.models.project import Project
from smartres_api.schemas import EmployeeCreate, EquipmentCreate, ProjectCreate
from smartres_api.services import ids

log = logging.getLogger(__name__)

EMPLOYEE, EQUIPMENT, PROJECT = "employee", "equipment", "project"

# header row + the sample row every template ships with
TEMPLATES: Dict[str, Tuple[List[str], List[Any]]] = {
    EMPLOYEE: (
        ["name", "employeeNumber", "governmentId", "tier", "position", "location", "experience", "skills", "wage", "costPerHour"],
        ["John Doe", "EMP-001", "ID-12345", 3, "Senior Welder", "New York", 5, "Welding, Fitting", 75000, 45],
    ),
    EQUIPMENT: (
        ["name", "make", "model", "year", "location", "value", "costPerHour", "depreciationRate"],
        ["Excavator #1", "Caterpillar", "320D", 2020, "Site A", 150000, 85, 10],
    ),
    PROJECT: (
        ["name", "description", "startDate", "endDate", "status", "priority", "budget", "location"],
        ["Project Alpha", "New construction project", "2024-01-01", "2024-12-31", "planning", "high", 500000, "New York"],
    ),
}

AVATAR_COLORS = (
    "bg-blue-500", "bg-green-500", "bg-purple-500", "bg-red-500",
    "bg-yellow-500", "bg-indigo-500", "bg-pink-500", "bg-teal-500",
)


class ImportFileError(ValueError):
    pass


# ---------- coercion ----------
def _blank(v) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def _text(v, default=None):
    if _blank(v):
        return default
    return str(v).strip()


def _num(v, default: float = 0) -> float:
    if _blank(v):
        return default
    try:
        return float(str(v).replace(",", "").strip())
    except ValueError:
        return default


def _int(v, default=None):
    n = _num(v, default=None)
    return int(n) if n is not None else default


def _list(v) -> List[str]:
    if _blank(v):
        return []
    if isinstance(v, (list, tuple)):
        return [str(x).strip() for x in v if not _blank(x)]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def _bool(v) -> bool:
    if isinstance(v, bool):
        return v
    return str(v or "").strip().lower() in ("true", "1", "yes", "y")


def _choice(v, allowed, default, field):
    s = _text(v)
    if s is None:
        return default
    s = s.lower()
    if s not in allowed:
        raise ValueError(f"{field} must be one of {', '.join(allowed)}")
    return s


def make_avatar(name: str) -> dict:
    parts = name.split()
    if len(parts) > 1:
        initials = (parts[0][0] + parts[1][0]).upper()
    else:
        initials = name[:2].upper()
    return {"initials": initials, "color": AVATAR_COLORS[ord(name[0]) % len(AVATAR_COLORS)]}


# ---------- row -> model ----------
# Rows are coerced from loose sheet values, then checked by the same request
# models the single-create endpoints use, so limits match exactly.
def build_employee(row: dict) -> Employee:
    name, position = _text(row.get("name")), _text(row.get("position"))
    if not name or not position:
        raise ValueError("Name and position are required")
    body = EmployeeCreate.model_validate({
        "name": name,
        "position": position,
        "employeeNumber": _text(row.get("employeeNumber")),
        "governmentId": _text(row.get("governmentId")),
        "tier": _int(row.get("tier")),
        "location": _text(row.get("location"), "Unknown"),
        "experience": _num(row.get("experience")),
        "skills": _list(row.get("skills")),
        "certifications": _list(row.get("certifications")),
        "availability": _choice(row.get("availability"), ("available", "busy", "unavailable"), "available", "availability"),
        "utilization": _num(row.get("utilization")),
        "wage": _num(row.get("wage")),
        "costPerHour": _num(row.get("costPerHour")),
        "isIndirect": _bool(row.get("isIndirect")),
    })
    return Employee(**body.model_dump(exclude={"avatar"}), avatar=make_avatar(name))


def build_equipment(row: dict) -> Equipment:
    name, make, model = _text(row.get("name")), _text(row.get("make")), _text(row.get("model"))
    if not name or not make or not model:
        raise ValueError("Name, make, and model are required")
    body = EquipmentCreate.model_validate({
        "name": name,
        "make": make,
        "model": model,
        "year": _int(row.get("year"), date.today().year),
        "location": _text(row.get("location"), "Unknown"),
        "availability": _choice(row.get("availability"), ("available", "busy", "maintenance"), "available", "availability"),
        "utilization": _num(row.get("utilization")),
        "maintenance": _choice(row.get("maintenance"), ("due", "current"), "current", "maintenance"),
        "lastMaintenance": parse_date(row.get("lastMaintenance")) or date.today(),
        "nextMaintenance": parse_date(row.get("nextMaintenance")) or date.today(),
        "value": _num(row.get("value")),
        "costPerHour": _num(row.get("costPerHour")),
        "depreciationRate": _num(row.get("depreciationRate")),
    })
    return Equipment(**body.model_dump())


def build_project(row: dict) -> Project:
    name = _text(row.get("name"))
    start, end = parse_date(row.get("startDate")), parse_date(row.get("endDate"))
    if not name or not start or not end:
        raise ValueError("Name, start date, and end date are required")
    if end < start:
        raise ValueError("End date cannot be before start date")
    body = ProjectCreate.model_validate({
        "name": name,
        "description": _text(row.get("description"), ""),
        "location": _text(row.get("location"), "Unknown"),
        "startDate": start,
        "endDate": end,
        "status": _choice(row.get("status"), ("planning", "active", "completed", "on-hold"), "planning", "status"),
        "priority": _choice(row.get("priority"), ("high", "medium", "low"), "medium", "priority"),
        "budget": _num(row.get("budget")),
        "actualCost": _num(row.get("actualCost")),
        "progress": _num(row.get("progress")),
    })
    return Project(**body.model_dump(exclude={"resource_requirements"}), resource_requirements=[])


def _describe(e: ValidationError) -> str:
    return "; ".join(f"{x['field']}: {x['message']}" if x["field"] else x["message"] for x in validation_errors(e))


_BUILDERS: Dict[str, Tuple[Callable[[dict], Any], str]] = {
    EMPLOYEE: (build_employee, ids.EMPLOYEE),
    EQUIPMENT: (build_equipment, ids.EQUIPMENT),
    PROJECT: (build_project, ids.PROJECT),
}


def import_rows(kind: str, rows: List[dict]) -> Tuple[list, List[str]]:
    """
    Insert every valid row of `rows` as a `kind` record in one commit.
    Returns (created models, ["Row N: reason", ...]) with N 1-based.
    """
    build, prefix = _BUILDERS[kind]
    created, errors = [], []
    for n, raw in enumerate(rows, start=1):
        if not isinstance(raw, dict):
            errors.append(f"Row {n}: expected an object")
            continue
        try:
            obj = build(raw)
        except ValidationError as e:
            errors.append(f"Row {n}: {_describe(e)}")
            continue
        except ValueError as e:
            errors.append(f"Row {n}: {e}")
            continue
        obj.id = ids.next_business_id(prefix)
        db.session.add(obj)
        created.append(obj)

    if created:
        db.session.commit()
    log.info("[bulk-import] kind=%s created=%d failed=%d", kind, len(created), len(errors))
    return created, errors


# ---------- spreadsheets ----------
def _rows_from_xlsx(data: bytes) -> List[dict]:
    try:
        wb = openpyxl.load_workbook(io.BytesIO(data), data_only=True, read_only=True)
    except Exception as e:
        raise ImportFileError("Failed to parse file. Please ensure it is a valid Excel or CSV file.") from e
    ws = wb.worksheets[0]
    headers: List[str] = []
    rows = []
    for i, row in enumerate(ws.iter_rows(values_only=True)):
        if i == 0:
            headers = [str(h).strip() if h is not None else "" for h in row]
            continue
        rec = {}
        for j, val in enumerate(row):
            key = headers[j] if j < len(headers) else ""
            if key:
                rec[key] = val
        rows.append(rec)
    wb.close()
    return rows


def _rows_from_csv(data: bytes) -> List[dict]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = data.decode("latin-1")
    reader = csv.DictReader(io.StringIO(text))
    return [{(k or "").strip(): v for k, v in r.items() if k} for r in reader]


def read_sheet(filename: str, data: bytes) -> List[dict]:
    """
    Parse the first sheet of an upload into row dicts keyed by header.
    The first data row is the template's sample and is dropped, as are blank rows.
    """
    name = (filename or "").lower()
    if name.endswith(".csv"):
        rows = _rows_from_csv(data)
    elif name.endswith((".xlsx", ".xlsm")):
        rows = _rows_from_xlsx(data)
    else:
        raise ImportFileError("Unsupported file type; upload .xlsx or .csv")

    if rows:
        rows = rows[1:]
    return [r for r in rows if any(not _blank(v) for v in r.values())]


def template_workbook(kind: str) -> bytes:
    headers, sample = TEMPLATES[kind]
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Template"
    ws.append(headers)
    ws.append(sample)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def label(kind: str, n: int) -> str:
    plural = {EMPLOYEE: "employees", EQUIPMENT: "equipment", PROJECT: "projects"}[kind]
    return plural if n != 1 else kind
