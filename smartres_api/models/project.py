from smartres_api.extensions import db
from smartres_api.models.base import SoftDeleteMixin


class Project(SoftDeleteMixin, db.Model):
    __tablename__ = "projects"

    id = db.Column(db.String(32), primary_key=True)          # PROJ001 ...
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    start_date = db.Column(db.Date, nullable=False, index=True)
    end_date = db.Column(db.Date, nullable=False, index=True)
    status = db.Column(db.String(16), nullable=False, default="planning")   # planning/active/completed/on-hold
    priority = db.Column(db.String(16), nullable=False, default="medium")   # high/medium/low
    location = db.Column(db.String(120), nullable=True)
    progress = db.Column(db.Float, nullable=False, default=0)
    budget = db.Column(db.Float, nullable=False, default=0)
    actual_cost = db.Column(db.Float, nullable=False, default=0)

    # [{"resourceMasterId": "RES001", "quantity": 3, "startDate": "2024-01-01", "endDate": null}]
    resource_requirements = db.Column(db.JSON, nullable=False, default=list)
    assigned_resources = db.Column(db.JSON, nullable=False, default=list)
