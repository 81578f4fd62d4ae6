from smartres_api.extensions import db
from smartres_api.models.base import SoftDeleteMixin


class Assignment(SoftDeleteMixin, db.Model):
    __tablename__ = "assignments"

    id = db.Column(db.String(32), primary_key=True)          # ASG001 ...
    project_id = db.Column(db.String(32), nullable=False, index=True)
    resource_id = db.Column(db.String(32), nullable=False, index=True)
    resource_type = db.Column(db.String(16), nullable=False)  # employee/equipment

    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(16), nullable=False, default="active")  # active/completed

    # null until the first revision; then [{"startDate", "endDate", "status"}] in chronological order
    schedule = db.Column(db.JSON, nullable=True)

    __table_args__ = (
        db.Index("ix_asg_range", "start_date", "end_date"),
    )
