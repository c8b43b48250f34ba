import pytest
from fastapi.testclient import TestClient

from shop.core.config import Settings
from shop.db.models import ROLE_EMPLOYEE, ROLE_MANAGER, User
from shop.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'shop.db'}",
        SECRET_KEY="test-secret",
        CREATE_TABLES=True,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Контекстный менеджер запускает startup: создание таблиц
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(app, db):
    def _make_user(username: str, password: str = "secret", role: str = ROLE_EMPLOYEE) -> User:
        user = User(
            username=username,
            password_hash=app.state.auth_service.get_password_hash(password),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def headers_for(app, make_user):
    def _headers_for(role: str) -> dict:
        user = make_user(f"{role}-user", role=role)
        token = app.state.auth_service.create_access_token(user)
        return {"Authorization": f"Bearer {token}"}

    return _headers_for


@pytest.fixture
def employee_headers(headers_for):
    return headers_for(ROLE_EMPLOYEE)


@pytest.fixture
def manager_headers(headers_for):
    return headers_for(ROLE_MANAGER)


@pytest.fixture
def category(client):
    resp = client.post("/v1/categories", json={"title": "Shoes"})
    assert resp.status_code == 200
    return resp.json()
