import os

import pytest

os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from smartres_api import create_app
from smartres_api.extensions import db


@pytest.fixture()
def app():
    os.environ["DATABASE_URL"] = "sqlite:///:memory:"
    app = create_app()
    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()
