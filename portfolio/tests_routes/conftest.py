# tests_routes/conftest.py
import pytest

from portfolio import create_app
from portfolio.models import User, RoleEnum
from portfolio.services.auth import AuthService

TEST_CONFIG = {
    "TESTING": True,
    "DATABASE_URL": "sqlite://",
    "JWT_SECRET": "test-secret",
    "JWT_EXPIRES_HOURS": 1,
    "SEED_DEFAULT_USERS": True,
}


@pytest.fixture
def app():
    app = create_app(dict(TEST_CONFIG))
    with app.app_context():
        factory = app.config["SESSION_FACTORY"]
        with factory() as session:
            # a second non-admin account next to the seeded admin/user
            session.add(User(
                username="other",
                email="other@example.com",
                password_hash=AuthService.hash_password("other123"),
                role=RoleEnum.USER,
                active=True,
            ))
            session.commit()
    yield app
    app.config["DB_ENGINE"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    """auth_headers('admin', 'admin123') -> {'Authorization': 'Bearer ...'}"""
    def _login(username, password):
        resp = client.post("/api/auth/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return {"Authorization": f"Bearer {resp.get_json()['token']}"}
    return _login
