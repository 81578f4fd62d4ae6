from datetime import date

from smartres_api.extensions import db
from smartres_api.models.base import SoftDeleteMixin


class Equipment(SoftDeleteMixin, db.Model):
    __tablename__ = "equipment"

    id = db.Column(db.String(32), primary_key=True)          # EQ001 ...
    name = db.Column(db.String(120), nullable=False)
    make = db.Column(db.String(120), nullable=False)
    model = db.Column(db.String(120), nullable=False)

    availability = db.Column(db.String(16), nullable=False, default="available")  # available/busy/maintenance
    utilization = db.Column(db.Float, nullable=False, default=0)
    location = db.Column(db.String(120), nullable=True)
    year = db.Column(db.Integer, nullable=True)

    last_maintenance = db.Column(db.Date, nullable=False, default=date.today)
    next_maintenance = db.Column(db.Date, nullable=False, default=date.today)
    maintenance = db.Column(db.String(16), nullable=False, default="current")    # due/current

    # cost tracking
    value = db.Column(db.Float, nullable=False, default=0)
    cost_per_hour = db.Column(db.Float, nullable=False, default=0)
    depreciation_rate = db.Column(db.Float, nullable=False, default=0)

    resource_master_id = db.Column(db.String(32), nullable=True, index=True)

    __table_args__ = (
        db.Index("ix_eq_availability", "availability"),
        db.Index("ix_eq_location", "location"),
    )
