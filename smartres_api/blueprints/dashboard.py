from flask import Blueprint
from sqlalchemy import case, func

from smartres_api.common.http import ok
from smartres_api.extensions import db
from smartres_api.models.assignment import Assignment
from smartres_api.models.employee import Employee
from smartres_api.models.equipment import Equipment
from smartres_api.models.project import Project

bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


def _count_by(model, col):
    rows = (
        db.session.query(col, func.count())
        .filter(model.is_deleted.is_(False))
        .group_by(col)
        .all()
    )
    return {k: n for k, n in rows}


def _stats(model):
    """(total, utilized, sum of utilization) over live rows."""
    total, utilized, util_sum = (
        db.session.query(
            func.count(),
            func.coalesce(func.sum(case((model.utilization > 0, 1), else_=0)), 0),
            func.coalesce(func.sum(model.utilization), 0),
        )
        .filter(model.is_deleted.is_(False))
        .one()
    )
    return total, int(utilized), float(util_sum)


@bp.get("/summary")
def summary():
    """
    Headline numbers for the dashboard:
      resources   -> employees + equipment (utilized = utilization > 0)
      employees / equipment -> counts by availability
      projects    -> counts by status
      assignments -> active count
    """
    emp_total, emp_used, emp_util = _stats(Employee)
    eq_total, eq_used, eq_util = _stats(Equipment)
    emp_by = _count_by(Employee, Employee.availability)
    eq_by = _count_by(Equipment, Equipment.availability)

    projects_by = _count_by(Project, Project.status)

    total = emp_total + eq_total
    data = {
        "resources": {
            "total": total,
            "available": emp_by.get("available", 0) + eq_by.get("available", 0),
            "utilized": emp_used + eq_used,
            "averageUtilization": round((emp_util + eq_util) / total, 1) if total else 0,
        },
        "employees": {"total": emp_total, "byAvailability": emp_by},
        "equipment": {"total": eq_total, "byAvailability": eq_by},
        "projects": {
            "total": sum(projects_by.values()),
            "byStatus": projects_by,
        },
        "assignments": {
            "active": Assignment.live().filter(Assignment.status == "active").count(),
        },
    }
    return ok(data)
