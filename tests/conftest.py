import pytest

from app import create_app
from core.db import GymDB, get_db
from core.seed import seed_demo_data


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SEED_DEMO_DATA": True,
        "EXPIRING_SOON_DAYS": 7,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    with app.app_context():
        return get_db()


@pytest.fixture
def seeded():
    """A standalone store with the demo records, no Flask app involved."""
    return seed_demo_data(GymDB())


@pytest.fixture
def login(client):
    def _login(role, identity_id=None):
        if role == "admin":
            return client.post("/login/admin")
        return client.post(f"/login/{role}/{identity_id}")
    return _login
