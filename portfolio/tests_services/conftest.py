# tests_services/conftest.py
import pytest

from portfolio.db.engine import make_engine, make_session_factory, init_db
from portfolio.models import User, RoleEnum
from portfolio.services.auth import AuthService

TEST_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture
def session():
    """Fresh in-memory database per test."""
    engine = make_engine("sqlite://")
    init_db(engine)
    factory = make_session_factory(engine)
    with factory() as s:
        yield s
    engine.dispose()


@pytest.fixture
def session_factory():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def auth_service(session):
    return AuthService(session, TEST_SECRET, expires_hours=1)


@pytest.fixture
def make_user(session):
    """Insert a user directly; password is 'secret' unless given."""
    def _make(username, role=RoleEnum.USER, password="secret"):
        user = User(
            username=username,
            email=f"{username}@example.com",
            password_hash=AuthService.hash_password(password),
            role=role,
            active=True,
        )
        session.add(user)
        session.commit()
        return user
    return _make
