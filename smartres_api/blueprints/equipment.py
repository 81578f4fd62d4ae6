from __future__ import annotations

from datetime import date

from flask import Blueprint, current_app, request
from sqlalchemy import asc

from smartres_api.common.dates import iso
from smartres_api.common.http import ok, fail
from smartres_api.common.paging import paged
from smartres_api.extensions import db
from smartres_api.models.equipment import Equipment
from smartres_api.schemas import EquipmentCreate, EquipmentUpdate
from smartres_api.services import ids

bp = Blueprint("equipment", __name__, url_prefix="/api/equipment")


def row(x: Equipment):
    return {
        "id": x.id,
        "type": "equipment",
        "name": x.name,
        "make": x.make,
        "model": x.model,
        "availability": x.availability,
        "utilization": x.utilization,
        "location": x.location,
        "year": x.year,
        "lastMaintenance": iso(x.last_maintenance),
        "nextMaintenance": iso(x.next_maintenance),
        "maintenance": x.maintenance,
        "value": x.value,
        "costPerHour": x.cost_per_hour,
        "depreciationRate": x.depreciation_rate,
        "resourceMasterId": x.resource_master_id,
        "isDeleted": x.is_deleted,
        "createdAt": iso(x.created_at),
        "updatedAt": iso(x.updated_at),
    }


def _get_live(eq_id: str) -> Equipment | None:
    return Equipment.live().filter(Equipment.id == eq_id).first()


@bp.get("")
def list_equipment():
    """
    GET /api/equipment
      ?availability=available|busy|maintenance
      &maintenance=due|current
      &location=Site A
    """
    qry = Equipment.live()
    for arg, col in (
        ("availability", Equipment.availability),
        ("maintenance", Equipment.maintenance),
        ("location", Equipment.location),
    ):
        v = request.args.get(arg)
        if v:
            qry = qry.filter(col == v)

    rows, meta = paged(qry.order_by(asc(Equipment.id)), row)
    return ok(rows, **meta)


@bp.get("/<eq_id>")
def get_equipment(eq_id: str):
    x = _get_live(eq_id)
    if not x:
        return fail("Equipment not found", 404)
    return ok(row(x))


@bp.post("")
def create_equipment():
    body = EquipmentCreate.parse(request.get_json(silent=True))
    data = body.model_dump()
    today = date.today()
    data["last_maintenance"] = data["last_maintenance"] or today
    data["next_maintenance"] = data["next_maintenance"] or today

    obj = Equipment(**data)
    obj.id = ids.next_business_id(ids.EQUIPMENT)
    db.session.add(obj)
    db.session.commit()
    current_app.logger.info("equipment created id=%s", obj.id)
    return ok(row(obj), 201, message="Equipment created successfully")


@bp.put("/<eq_id>")
def update_equipment(eq_id: str):
    obj = _get_live(eq_id)
    if not obj:
        return fail("Equipment not found", 404)

    body = EquipmentUpdate.parse(request.get_json(silent=True))
    for key, val in body.changes().items():
        setattr(obj, key, val)
    obj.touch()
    db.session.commit()
    return ok(row(obj), message="Equipment updated successfully")


@bp.delete("/<eq_id>")
def delete_equipment(eq_id: str):
    obj = _get_live(eq_id)
    if not obj:
        return fail("Equipment not found", 404)
    obj.soft_delete()
    obj.resource_master_id = None
    db.session.commit()
    return ok({"id": eq_id, "isDeleted": True}, message="Equipment deleted successfully")
