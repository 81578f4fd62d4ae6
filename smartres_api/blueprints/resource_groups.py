from __future__ import annotations

from flask import Blueprint, request
from sqlalchemy import asc

from smartres_api.common.dates import iso
from smartres_api.common.http import ok, fail
from smartres_api.common.paging import paged
from smartres_api.extensions import db
from smartres_api.models.resource_group import ResourceGroup
from smartres_api.schemas import ResourceGroupCreate, ResourceGroupUpdate
from smartres_api.services import ids

bp = Blueprint("resource_groups", __name__, url_prefix="/api/resource-groups")


def _row(x: ResourceGroup):
    return {
        "id": x.id,
        "name": x.name,
        "groupType": x.group_type,
        "description": x.description,
        "memberIds": x.member_ids or [],
        "memberCount": x.member_count,
        "averageCostPerHour": x.average_cost_per_hour,
        "totalCapacity": x.total_capacity,
        "location": x.location,
        "isDeleted": x.is_deleted,
        "createdAt": iso(x.created_at),
        "updatedAt": iso(x.updated_at),
    }


def _get_live(rg_id: str) -> ResourceGroup | None:
    return ResourceGroup.live().filter(ResourceGroup.id == rg_id).first()


@bp.get("")
def list_resource_groups():
    """GET /api/resource-groups?groupType=welders"""
    qry = ResourceGroup.live()
    group_type = request.args.get("groupType")
    if group_type:
        qry = qry.filter(ResourceGroup.group_type == group_type)
    rows, meta = paged(qry.order_by(asc(ResourceGroup.id)), _row)
    return ok(rows, **meta)


@bp.get("/<rg_id>")
def get_resource_group(rg_id: str):
    x = _get_live(rg_id)
    if not x:
        return fail("Resource group not found", 404)
    return ok(_row(x))


@bp.post("")
def create_resource_group():
    body = ResourceGroupCreate.parse(request.get_json(silent=True))
    obj = ResourceGroup(**body.model_dump(exclude={"member_ids"}))
    obj.set_members(body.member_ids)
    obj.id = ids.next_business_id(ids.RESOURCE_GROUP)
    db.session.add(obj)
    db.session.commit()
    return ok(_row(obj), 201, message="Resource group created successfully")


@bp.put("/<rg_id>")
def update_resource_group(rg_id: str):
    obj = _get_live(rg_id)
    if not obj:
        return fail("Resource group not found", 404)

    changes = ResourceGroupUpdate.parse(request.get_json(silent=True)).changes()
    members = changes.pop("member_ids", None)
    for key, val in changes.items():
        setattr(obj, key, val)
    if members is not None:
        obj.set_members(members)
    obj.touch()
    db.session.commit()
    return ok(_row(obj), message="Resource group updated successfully")


@bp.delete("/<rg_id>")
def delete_resource_group(rg_id: str):
    obj = _get_live(rg_id)
    if not obj:
        return fail("Resource group not found", 404)
    obj.soft_delete()
    db.session.commit()
    return ok({"id": rg_id, "isDeleted": True}, message="Resource group deleted successfully")
