from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from smartres_api.common.http import ok
from smartres_api.extensions import db

bp = Blueprint("health", __name__, url_prefix="/api")


@bp.get("/health")
def health():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        current_app.logger.warning("health: database unreachable: %s", e)
        db.session.rollback()
        database = "unreachable"
    return ok({"status": "ok", "database": database})
