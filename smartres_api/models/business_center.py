from smartres_api.extensions import db
from smartres_api.models.base import SoftDeleteMixin


class BusinessCenter(SoftDeleteMixin, db.Model):
    __tablename__ = "business_centers"

    id = db.Column(db.String(32), primary_key=True)          # BC001 ...
    name = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(64), nullable=False)
    capacity = db.Column(db.Integer, nullable=False, default=0)
    current_occupancy = db.Column(db.Integer, nullable=False, default=0)
    manager = db.Column(db.String(120), nullable=True)
    contact = db.Column(db.String(120), nullable=True)
    location = db.Column(db.String(120), nullable=True)
