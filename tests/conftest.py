import pytest
from flask_jwt_extended import create_access_token

from pagecraft import create_app
from pagecraft.extensions import db


@pytest.fixture()
def app(tmp_path):
    # File-backed so composition worker threads see committed rows
    app = create_app(
        "testing",
        overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path/'test.db'}"},
    )

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def _bearer(role):
    token = create_access_token(identity="admin-1", additional_claims={"role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(app):
    return _bearer("admin")


@pytest.fixture()
def editor_headers(app):
    return _bearer("editor")
