from datetime import datetime, timezone

from smartres_api.extensions import db


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SoftDeleteMixin:
    """
    Columns every collection carries:
      is_deleted  -> soft delete flag, rows with True are hidden from default queries
      created_at  -> insert time (UTC)
      updated_at  -> last write time (UTC)
    """

    is_deleted = db.Column(db.Boolean, default=False, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    @classmethod
    def live(cls):
        return cls.query.filter(cls.is_deleted.is_(False))

    def touch(self):
        self.updated_at = utcnow()

    def soft_delete(self):
        self.is_deleted = True
        self.touch()
