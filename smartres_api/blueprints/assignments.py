from __future__ import annotations

from flask import Blueprint, current_app, request
from sqlalchemy import asc

from smartres_api.common.dates import iso, parse_date
from smartres_api.common.errors import NotFound
from smartres_api.common.http import ok, fail
from smartres_api.common.paging import paged
from smartres_api.extensions import db
from smartres_api.models.assignment import Assignment
from smartres_api.models.employee import Employee
from smartres_api.models.equipment import Equipment
from smartres_api.models.project import Project
from smartres_api.schemas import AssignmentCreate, ScheduleRevision
from smartres_api.services import ids
from smartres_api.services.schedule_editor import (
    DateRange,
    ScheduleValidationError,
    overall_bounds,
    validate_ranges,
)

bp = Blueprint("assignments", __name__, url_prefix="/api/assignments")

_RESOURCE_MODELS = {"employee": Employee, "equipment": Equipment}


def _row(x: Assignment):
    return {
        "id": x.id,
        "projectId": x.project_id,
        "resourceId": x.resource_id,
        "resourceType": x.resource_type,
        "startDate": iso(x.start_date),
        "endDate": iso(x.end_date),
        "status": x.status,
        "schedule": x.schedule,
        "isDeleted": x.is_deleted,
        "createdAt": iso(x.created_at),
        "updatedAt": iso(x.updated_at),
    }


def _get_live(asg_id: str) -> Assignment | None:
    return Assignment.live().filter(Assignment.id == asg_id).first()


@bp.get("")
def list_assignments():
    """
    GET /api/assignments
      ?projectId=PROJ001
      &resourceId=EMP001
      &status=active|completed
      &startDate=2024-01-01&endDate=2024-01-31   (overlap window, both required)
    """
    qry = Assignment.live()
    for arg, col in (
        ("projectId", Assignment.project_id),
        ("resourceId", Assignment.resource_id),
        ("status", Assignment.status),
    ):
        v = request.args.get(arg)
        if v:
            qry = qry.filter(col == v)

    s_raw, e_raw = request.args.get("startDate"), request.args.get("endDate")
    if s_raw and e_raw:
        s, e = parse_date(s_raw), parse_date(e_raw)
        if not s or not e:
            return fail("startDate/endDate must be YYYY-MM-DD", 422)
        qry = qry.filter(Assignment.start_date <= e, Assignment.end_date >= s)

    rows, meta = paged(qry.order_by(asc(Assignment.start_date), asc(Assignment.id)), _row)
    return ok(rows, **meta)


@bp.get("/<asg_id>")
def get_assignment(asg_id: str):
    x = _get_live(asg_id)
    if not x:
        return fail("Assignment not found", 404)
    return ok(_row(x))


@bp.post("")
def create_assignment():
    body = AssignmentCreate.parse(request.get_json(silent=True))

    if not Project.live().filter(Project.id == body.project_id).first():
        raise NotFound("Project not found")
    model = _RESOURCE_MODELS[body.resource_type]
    if not model.live().filter(model.id == body.resource_id).first():
        raise NotFound("Resource not found")

    obj = Assignment(**body.model_dump(), status="active")
    obj.id = ids.next_business_id(ids.ASSIGNMENT)
    db.session.add(obj)
    db.session.commit()
    current_app.logger.info(
        "assignment created id=%s project=%s resource=%s", obj.id, obj.project_id, obj.resource_id
    )
    return ok(_row(obj), 201, message="Assignment created successfully")


@bp.put("")
def revise_schedule():
    """
    PUT /api/assignments
    Body: {"id": "ASG001", "schedule": [{"startDate", "endDate", "status"?}, ...]}

    The new schedule must lie inside the assignment's current period; the
    period then shrinks to the schedule's earliest start and latest end.
    """
    body = ScheduleRevision.parse(request.get_json(silent=True), read_only=())

    obj = _get_live(body.id)
    if not obj:
        return fail("Assignment not found", 404)

    ranges = [DateRange(e.start_date, e.end_date) for e in body.schedule]
    try:
        validate_ranges(ranges, obj.start_date, obj.end_date)
    except ScheduleValidationError as e:
        return fail(e.message, 422, code="SCHEDULE_INVALID", detail={"index": e.index, "kind": e.kind})

    obj.schedule = [r.as_entry(e.status) for r, e in zip(ranges, body.schedule)]
    obj.start_date, obj.end_date = overall_bounds(ranges)
    obj.touch()
    db.session.commit()
    current_app.logger.info("assignment %s schedule revised: %d ranges", obj.id, len(ranges))

    return ok(
        {
            "id": obj.id,
            "schedule": obj.schedule,
            "startDate": iso(obj.start_date),
            "endDate": iso(obj.end_date),
            "updatedAt": iso(obj.updated_at),
        },
        message="Schedule updated successfully",
    )
