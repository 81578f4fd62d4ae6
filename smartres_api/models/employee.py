from smartres_api.extensions import db
from smartres_api.models.base import SoftDeleteMixin


class Employee(SoftDeleteMixin, db.Model):
    __tablename__ = "employees"

    id = db.Column(db.String(32), primary_key=True)          # EMP001 ...
    name = db.Column(db.String(120), nullable=False)
    employee_number = db.Column(db.String(64), nullable=True)
    government_id = db.Column(db.String(64), nullable=True)
    tier = db.Column(db.SmallInteger, nullable=True)          # 1..5
    position = db.Column(db.String(120), nullable=False)

    skills = db.Column(db.JSON, nullable=False, default=list)
    certifications = db.Column(db.JSON, nullable=False, default=list)
    availability = db.Column(db.String(16), nullable=False, default="available")  # available/busy/unavailable
    utilization = db.Column(db.Float, nullable=False, default=0)
    location = db.Column(db.String(120), nullable=True)
    experience = db.Column(db.Float, nullable=False, default=0)
    avatar = db.Column(db.JSON, nullable=True)                # {"initials": "SJ", "color": "bg-blue-500"}

    # cost tracking
    wage = db.Column(db.Float, nullable=False, default=0)
    cost_per_hour = db.Column(db.Float, nullable=False, default=0)
    is_indirect = db.Column(db.Boolean, nullable=False, default=False)

    resource_master_id = db.Column(db.String(32), nullable=True, index=True)

    __table_args__ = (
        db.Index("ix_emp_availability", "availability"),
        db.Index("ix_emp_location", "location"),
    )
