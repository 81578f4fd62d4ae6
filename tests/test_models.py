from datetime import datetime, timedelta, timezone

from smartres_api.extensions import db
from smartres_api.models.base import utcnow
from smartres_api.models.resource_master import ResourceMaster


def test_utcnow_is_naive_utc():
    now = utcnow()
    assert now.tzinfo is None
    expected = datetime.now(timezone.utc).replace(tzinfo=None)
    assert abs(expected - now) < timedelta(seconds=5)


def test_audit_columns_default_and_touch(app):
    x = ResourceMaster(resource_id="RES900", resource_name="Welder", resource_type="manpower")
    db.session.add(x)
    db.session.commit()
    assert x.created_at is not None
    assert x.created_at.tzinfo is None
    assert x.is_deleted is False

    x.updated_at = x.created_at - timedelta(days=1)
    x.soft_delete()
    db.session.commit()
    assert x.is_deleted is True
    assert x.updated_at > x.created_at
    assert ResourceMaster.live().filter_by(resource_id="RES900").first() is None
