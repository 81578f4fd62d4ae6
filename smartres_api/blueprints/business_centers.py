from __future__ import annotations

from flask import Blueprint, request
from sqlalchemy import asc

from smartres_api.common.dates import iso
from smartres_api.common.http import ok, fail
from smartres_api.common.paging import paged
from smartres_api.extensions import db
from smartres_api.models.business_center import BusinessCenter
from smartres_api.schemas import BUSINESS_CENTER_READ_ONLY, BusinessCenterCreate, BusinessCenterUpdate
from smartres_api.services import ids

bp = Blueprint("business_centers", __name__, url_prefix="/api/business-centers")


def _row(x: BusinessCenter):
    return {
        "id": x.id,
        "name": x.name,
        "type": x.type,
        "capacity": x.capacity,
        "currentOccupancy": x.current_occupancy,
        "manager": x.manager,
        "contact": x.contact,
        "location": x.location,
        "isDeleted": x.is_deleted,
        "createdAt": iso(x.created_at),
        "updatedAt": iso(x.updated_at),
    }


def _get_live(bc_id: str) -> BusinessCenter | None:
    return BusinessCenter.live().filter(BusinessCenter.id == bc_id).first()


@bp.get("")
def list_business_centers():
    rows, meta = paged(BusinessCenter.live().order_by(asc(BusinessCenter.id)), _row)
    return ok(rows, **meta)


@bp.get("/<bc_id>")
def get_business_center(bc_id: str):
    x = _get_live(bc_id)
    if not x:
        return fail("Business center not found", 404)
    return ok(_row(x))


@bp.post("")
def create_business_center():
    body = BusinessCenterCreate.parse(request.get_json(silent=True), read_only=BUSINESS_CENTER_READ_ONLY)
    obj = BusinessCenter(**body.model_dump())
    obj.id = ids.next_business_id(ids.BUSINESS_CENTER)
    db.session.add(obj)
    db.session.commit()
    return ok(_row(obj), 201, message="Business center created successfully")


@bp.put("/<bc_id>")
def update_business_center(bc_id: str):
    obj = _get_live(bc_id)
    if not obj:
        return fail("Business center not found", 404)
    body = BusinessCenterUpdate.parse(request.get_json(silent=True), read_only=BUSINESS_CENTER_READ_ONLY)
    for key, val in body.changes().items():
        setattr(obj, key, val)
    obj.touch()
    db.session.commit()
    return ok(_row(obj), message="Business center updated successfully")


@bp.delete("/<bc_id>")
def delete_business_center(bc_id: str):
    obj = _get_live(bc_id)
    if not obj:
        return fail("Business center not found", 404)
    obj.soft_delete()
    db.session.commit()
    return ok({"id": bc_id, "isDeleted": True}, message="Business center deleted successfully")
