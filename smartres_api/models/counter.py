from smartres_api.extensions import db


class IdCounter(db.Model):
    """One row per business-key prefix (EMP, EQ, PROJ ...), holding the last issued number."""

    __tablename__ = "id_counters"

    prefix = db.Column(db.String(16), primary_key=True)
    value = db.Column(db.Integer, nullable=False, default=0)
