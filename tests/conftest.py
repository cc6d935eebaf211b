import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from models import db


@pytest.fixture(scope='session')
def app_instance():
    os.environ.setdefault('APP_ENV', 'testing')
    from app import create_app
    from app.config import TestingConfig
    app = create_app(TestingConfig)
    app.config.update(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI='sqlite:///:memory:',
        SQLALCHEMY_TRACK_MODIFICATIONS=False
    )
    return app


@pytest.fixture(scope='function')
def app(app_instance):
    from app.services.accounts import ensure_root_admin
    from app.utils.db import transactional
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        with transactional("Failed to seed root admin"):
            ensure_root_admin()
        yield app_instance
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture
def make_app(monkeypatch):
    """Build a fresh app from TestingConfig with some settings overridden."""
    monkeypatch.setenv('APP_ENV', 'testing')

    def _make(**overrides):
        from app import create_app
        from app.config import TestingConfig
        config = type("OverriddenTestingConfig", (TestingConfig,), overrides)
        return create_app(config)

    return _make
