from smartres_api.extensions import db
from smartres_api.models.base import SoftDeleteMixin


class ResourceMaster(SoftDeleteMixin, db.Model):
    """Catalog entry for a category of resource (e.g. "Senior Welder")."""

    __tablename__ = "resource_masters"

    resource_id = db.Column(db.String(32), primary_key=True)  # RES001 ...
    resource_name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    resource_type = db.Column(db.String(16), nullable=False)  # manpower/equipment
