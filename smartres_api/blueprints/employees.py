from __future__ import annotations

import json

from flask import Blueprint, current_app, request
from sqlalchemy import String, asc, cast

from smartres_api.common.dates import iso
from smartres_api.common.http import ok, fail
from smartres_api.common.paging import bool_arg, paged
from smartres_api.extensions import db
from smartres_api.models.employee import Employee
from smartres_api.schemas import EmployeeCreate, EmployeeUpdate
from smartres_api.services import ids
from smartres_api.services.bulk_import import make_avatar

bp = Blueprint("employees", __name__, url_prefix="/api/employees")


# ---------- row shape ----------
def row(x: Employee):
    return {
        "id": x.id,
        "type": "employee",
        "name": x.name,
        "employeeNumber": x.employee_number,
        "governmentId": x.government_id,
        "tier": x.tier,
        "position": x.position,
        "skills": x.skills or [],
        "certifications": x.certifications or [],
        "availability": x.availability,
        "utilization": x.utilization,
        "location": x.location,
        "experience": x.experience,
        "avatar": x.avatar,
        "wage": x.wage,
        "costPerHour": x.cost_per_hour,
        "isIndirect": x.is_indirect,
        "resourceMasterId": x.resource_master_id,
        "isDeleted": x.is_deleted,
        "createdAt": iso(x.created_at),
        "updatedAt": iso(x.updated_at),
    }


def _get_live(emp_id: str) -> Employee | None:
    return Employee.live().filter(Employee.id == emp_id).first()


def _like_escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _apply(obj: Employee, changes: dict):
    for key, val in changes.items():
        setattr(obj, key, val)


# ---------- routes ----------
@bp.get("")
def list_employees():
    """
    GET /api/employees
      ?availability=available|busy|unavailable
      &skills=Welding           (employee has this skill)
      &isIndirect=true|false
      &location=North Plant
      &page=1&size=20           (optional)
    """
    qry = Employee.live()

    availability = request.args.get("availability")
    if availability:
        qry = qry.filter(Employee.availability == availability)

    skill = (request.args.get("skills") or "").strip()
    if skill:
        # match the element exactly as the JSON column stores it (quoted, \uXXXX-escaped)
        needle = _like_escape(json.dumps(skill))
        qry = qry.filter(cast(Employee.skills, String).like(f"%{needle}%", escape="\\"))

    try:
        indirect = bool_arg("isIndirect")
    except ValueError as ex:
        return fail(str(ex), 422)
    if indirect is not None:
        qry = qry.filter(Employee.is_indirect.is_(indirect))

    location = request.args.get("location")
    if location:
        qry = qry.filter(Employee.location == location)

    rows, meta = paged(qry.order_by(asc(Employee.id)), row)
    return ok(rows, **meta)


@bp.get("/<emp_id>")
def get_employee(emp_id: str):
    x = _get_live(emp_id)
    if not x:
        return fail("Employee not found", 404)
    return ok(row(x))


@bp.post("")
def create_employee():
    body = EmployeeCreate.parse(request.get_json(silent=True))

    obj = Employee(**body.model_dump(exclude={"avatar"}))
    obj.avatar = body.avatar.model_dump() if body.avatar else make_avatar(body.name)
    obj.id = ids.next_business_id(ids.EMPLOYEE)

    db.session.add(obj)
    db.session.commit()
    current_app.logger.info("employee created id=%s", obj.id)
    return ok(row(obj), 201, message="Employee created successfully")


@bp.put("/<emp_id>")
def update_employee(emp_id: str):
    obj = _get_live(emp_id)
    if not obj:
        return fail("Employee not found", 404)

    body = EmployeeUpdate.parse(request.get_json(silent=True))
    changes = body.changes()

    _apply(obj, changes)
    obj.touch()
    db.session.commit()
    return ok(row(obj), message="Employee updated successfully")


@bp.delete("/<emp_id>")
def delete_employee(emp_id: str):
    obj = _get_live(emp_id)
    if not obj:
        return fail("Employee not found", 404)
    # Soft delete; the resource-master link is dropped with it
    obj.soft_delete()
    obj.resource_master_id = None
    db.session.commit()
    return ok({"id": emp_id, "isDeleted": True}, message="Employee deleted successfully")
