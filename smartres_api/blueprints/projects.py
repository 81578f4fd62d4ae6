from __future__ import annotations

from flask import Blueprint, current_app, request
from sqlalchemy import asc

from smartres_api.common.dates import iso
from smartres_api.common.http import ok, fail
from smartres_api.common.paging import paged
from smartres_api.extensions import db
from smartres_api.models.project import Project
from smartres_api.schemas import ProjectCreate, ProjectUpdate
from smartres_api.services import ids

bp = Blueprint("projects", __name__, url_prefix="/api/projects")


def row(x: Project):
    return {
        "id": x.id,
        "name": x.name,
        "description": x.description,
        "startDate": iso(x.start_date),
        "endDate": iso(x.end_date),
        "status": x.status,
        "priority": x.priority,
        "location": x.location,
        "progress": x.progress,
        "budget": x.budget,
        "actualCost": x.actual_cost,
        "resourceRequirements": x.resource_requirements or [],
        "assignedResources": x.assigned_resources or [],
        "isDeleted": x.is_deleted,
        "createdAt": iso(x.created_at),
        "updatedAt": iso(x.updated_at),
    }


def _get_live(project_id: str) -> Project | None:
    return Project.live().filter(Project.id == project_id).first()


@bp.get("")
def list_projects():
    """
    GET /api/projects
      ?status=planning|active|completed|on-hold
      &priority=high|medium|low
      &location=North Plant
    """
    qry = Project.live()
    for arg, col in (
        ("status", Project.status),
        ("priority", Project.priority),
        ("location", Project.location),
    ):
        v = request.args.get(arg)
        if v:
            qry = qry.filter(col == v)

    rows, meta = paged(qry.order_by(asc(Project.id)), row)
    return ok(rows, **meta)


@bp.get("/<project_id>")
def get_project(project_id: str):
    x = _get_live(project_id)
    if not x:
        return fail("Project not found", 404)
    return ok(row(x))


@bp.post("")
def create_project():
    body = ProjectCreate.parse(request.get_json(silent=True))
    data = body.model_dump(exclude={"resource_requirements"})

    obj = Project(**data)
    obj.resource_requirements = [r.as_json() for r in body.resource_requirements]
    obj.id = ids.next_business_id(ids.PROJECT)
    db.session.add(obj)
    db.session.commit()
    current_app.logger.info("project created id=%s", obj.id)
    return ok(row(obj), 201, message="Project created successfully")


@bp.put("/<project_id>")
def update_project(project_id: str):
    obj = _get_live(project_id)
    if not obj:
        return fail("Project not found", 404)

    body = ProjectUpdate.parse(request.get_json(silent=True))
    changes = body.changes()
    if "resource_requirements" in changes:
        changes["resource_requirements"] = [r.as_json() for r in body.resource_requirements]

    start = changes.get("start_date", obj.start_date)
    end = changes.get("end_date", obj.end_date)
    if end < start:
        return fail("endDate cannot be before startDate", 422)

    for key, val in changes.items():
        setattr(obj, key, val)
    obj.touch()
    db.session.commit()
    return ok(row(obj), message="Project updated successfully")


@bp.delete("/<project_id>")
def delete_project(project_id: str):
    obj = _get_live(project_id)
    if not obj:
        return fail("Project not found", 404)
    obj.soft_delete()
    db.session.commit()
    return ok({"id": project_id, "isDeleted": True}, message="Project deleted successfully")
