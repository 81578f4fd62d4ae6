from __future__ import annotations

from flask import Blueprint, request
from sqlalchemy import asc

from smartres_api.common.dates import iso
from smartres_api.common.http import ok, fail
from smartres_api.common.paging import paged
from smartres_api.extensions import db
from smartres_api.models.resource_master import ResourceMaster
from smartres_api.schemas import RESOURCE_MASTER_READ_ONLY, ResourceMasterCreate, ResourceMasterUpdate
from smartres_api.services import ids

bp = Blueprint("resource_masters", __name__, url_prefix="/api/resource-masters")


def _row(x: ResourceMaster):
    return {
        "resourceId": x.resource_id,
        "resourceName": x.resource_name,
        "description": x.description,
        "resourceType": x.resource_type,
        "isDeleted": x.is_deleted,
        "createdAt": iso(x.created_at),
        "updatedAt": iso(x.updated_at),
    }


def _get_live(resource_id: str) -> ResourceMaster | None:
    return ResourceMaster.live().filter(ResourceMaster.resource_id == resource_id).first()


@bp.get("")
def list_resource_masters():
    """GET /api/resource-masters?resourceType=manpower|equipment"""
    qry = ResourceMaster.live()
    rtype = request.args.get("resourceType")
    if rtype:
        qry = qry.filter(ResourceMaster.resource_type == rtype)
    rows, meta = paged(qry.order_by(asc(ResourceMaster.resource_id)), _row)
    return ok(rows, **meta)


@bp.get("/<resource_id>")
def get_resource_master(resource_id: str):
    x = _get_live(resource_id)
    if not x:
        return fail("Resource master not found", 404)
    return ok(_row(x))


@bp.post("")
def create_resource_master():
    body = ResourceMasterCreate.parse(request.get_json(silent=True), read_only=RESOURCE_MASTER_READ_ONLY)
    obj = ResourceMaster(**body.model_dump())
    obj.resource_id = ids.next_business_id(ids.RESOURCE_MASTER)
    db.session.add(obj)
    db.session.commit()
    return ok(_row(obj), 201, message="Resource master created successfully")


@bp.put("/<resource_id>")
def update_resource_master(resource_id: str):
    obj = _get_live(resource_id)
    if not obj:
        return fail("Resource master not found", 404)
    body = ResourceMasterUpdate.parse(request.get_json(silent=True), read_only=RESOURCE_MASTER_READ_ONLY)
    for key, val in body.changes().items():
        setattr(obj, key, val)
    obj.touch()
    db.session.commit()
    return ok(_row(obj), message="Resource master updated successfully")


@bp.delete("/<resource_id>")
def delete_resource_master(resource_id: str):
    obj = _get_live(resource_id)
    if not obj:
        return fail("Resource master not found", 404)
    obj.soft_delete()
    db.session.commit()
    return ok(_row(obj), message="Resource master deleted successfully")
