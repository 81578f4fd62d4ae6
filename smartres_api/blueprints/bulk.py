from __future__ import annotations

import io

from flask import Blueprint, current_app, request, send_file

from smartres_api.common.http import ok, fail
from smartres_api.blueprints import employees, equipment, projects
from smartres_api.services import bulk_import as bi

bp = Blueprint("bulk", __name__, url_prefix="/api")

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# url segment -> (import kind, row serializer)
_COLLECTIONS = {
    "employees": (bi.EMPLOYEE, employees.row),
    "equipment": (bi.EQUIPMENT, equipment.row),
    "projects": (bi.PROJECT, projects.row),
}


def _import(collection: str, rows):
    kind, to_row = _COLLECTIONS[collection]
    created, errors = bi.import_rows(kind, rows)
    msg = f"Successfully imported {len(created)} {bi.label(kind, len(created))}. {len(errors)} failed."
    current_app.logger.info("bulk %s: %s", collection, msg)
    return ok([to_row(x) for x in created], 201 if created else 200, message=msg, errors=errors)


@bp.post("/employees/bulk", defaults={"collection": "employees"})
@bp.post("/equipment/bulk", defaults={"collection": "equipment"})
@bp.post("/projects/bulk", defaults={"collection": "projects"})
def bulk_json(collection: str):
    """
    POST /api/<collection>/bulk
    Body: [ {row}, {row}, ... ]  (or one object). The sample row is already removed by the caller.
    """
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not data:
        return fail("No data provided", 400)
    return _import(collection, data)


@bp.post("/employees/bulk/upload", defaults={"collection": "employees"})
@bp.post("/equipment/bulk/upload", defaults={"collection": "equipment"})
@bp.post("/projects/bulk/upload", defaults={"collection": "projects"})
def bulk_upload(collection: str):
    """POST /api/<collection>/bulk/upload  multipart: file=<.xlsx|.csv>"""
    f = request.files.get("file")
    if f is None or not f.filename:
        return fail("No file uploaded", 400)
    try:
        rows = bi.read_sheet(f.filename, f.read())
    except bi.ImportFileError as e:
        return fail(str(e), 400)
    if not rows:
        return fail("No data provided", 400)
    return _import(collection, rows)


@bp.get("/employees/bulk/template", defaults={"collection": "employees"})
@bp.get("/equipment/bulk/template", defaults={"collection": "equipment"})
@bp.get("/projects/bulk/template", defaults={"collection": "projects"})
def bulk_template(collection: str):
    kind, _ = _COLLECTIONS[collection]
    content = bi.template_workbook(kind)
    return send_file(
        io.BytesIO(content),
        mimetype=XLSX_MIME,
        as_attachment=True,
        download_name=f"{collection}_template.xlsx",
    )
