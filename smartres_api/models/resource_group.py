from smartres_api.extensions import db
from smartres_api.models.base import SoftDeleteMixin


class ResourceGroup(SoftDeleteMixin, db.Model):
    __tablename__ = "resource_groups"

    id = db.Column(db.String(32), primary_key=True)          # RG001 ...
    name = db.Column(db.String(255), nullable=False)
    group_type = db.Column(db.String(32), nullable=False, index=True)  # welders/pipe-fitters/electricians/laborers/other
    description = db.Column(db.Text, nullable=False, default="")
    member_ids = db.Column(db.JSON, nullable=False, default=list)
    member_count = db.Column(db.Integer, nullable=False, default=0)
    average_cost_per_hour = db.Column(db.Float, nullable=False, default=0)
    total_capacity = db.Column(db.Float, nullable=False, default=0)
    location = db.Column(db.String(120), nullable=True)

    def set_members(self, ids):
        self.member_ids = list(ids or [])
        self.member_count = len(self.member_ids)
