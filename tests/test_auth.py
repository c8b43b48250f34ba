from datetime import timedelta

import jwt

from shop.core.auth import AuthService
from shop.core.config import Settings
from shop.db.models import User


def make_service(**overrides):
    return AuthService(Settings(SECRET_KEY="unit-secret", **overrides))


def test_password_hashing():
    hashed = AuthService.get_password_hash("admin123")
    assert hashed != "admin123"
    assert AuthService.verify_password("admin123", hashed)
    assert not AuthService.verify_password("admin124", hashed)


def test_token_claims():
    service = make_service()
    user = User(id=5, username="alice", role="manager")

    token = service.create_access_token(user)
    claims = service.verify_token(token)

    assert claims["sub"] == "5"
    assert claims["username"] == "alice"
    assert claims["role"] == "manager"
    assert claims["exp"] - claims["iat"] == 120 * 60


def test_expired_token_is_rejected():
    service = make_service()
    user = User(id=1, username="alice", role="employee")

    token = service.create_access_token(user, expires_delta=timedelta(seconds=-1))
    assert service.verify_token(token) is None


def test_token_signed_with_other_key_is_rejected():
    user = User(id=1, username="alice", role="manager")
    forged = AuthService(Settings(SECRET_KEY="attacker")).create_access_token(user)

    assert make_service().verify_token(forged) is None
    assert make_service().verify_token("not-a-token") is None


def test_gate_rejects_bad_tokens(client, app):
    user = User(id=1, username="ghost", role="manager")
    expired = app.state.auth_service.create_access_token(user, expires_delta=timedelta(minutes=-5))
    no_role = jwt.encode({"sub": "1"}, "test-secret", algorithm="HS256")

    for token in (expired, no_role, "garbage"):
        resp = client.get("/v1/users", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
        assert resp.json() == {"message": "Could not validate credentials"}


def test_gate_trusts_token_without_database_lookup(client, app):
    # Пользователя с таким id в базе нет: роль берется из подписанного токена
    user = User(id=1000, username="ghost", role="manager")
    token = app.state.auth_service.create_access_token(user)

    resp = client.get("/v1/users", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
