"""
Модуль аутентификации и авторизации.

Содержит функции для работы с JWT токенами, хеширования паролей
и проверки ролей пользователей.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext

from shop.core.config import Settings
from shop.db.models.user import User

# Настройка хеширования паролей
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# HTTP Bearer схема; отсутствие заголовка обрабатываем сами (401, а не 403)
security = HTTPBearer(auto_error=False)


class AuthService:
    """
    Сервис для работы с аутентификацией.

    Подписывает и проверяет JWT токены ключом из настроек приложения.
    Проверка токена не обращается к базе данных: роль берется из claims.
    """

    def __init__(self, settings: Settings):
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Проверка пароля."""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def dummy_verify() -> None:
        """Проверка пароля впустую, чтобы время ответа не выдавало отсутствие пользователя."""
        pwd_context.dummy_verify()

    @staticmethod
    def get_password_hash(password: str) -> str:
        """Хеширование пароля."""
        return pwd_context.hash(password)

    def create_access_token(
        self, user: User, expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Создание JWT токена для пользователя.

        Args:
            user: Аутентифицированный пользователь
            expires_delta: Время жизни токена (по умолчанию из настроек)

        Returns:
            str: Подписанный токен с claims sub, username и role
        """
        now = datetime.now(timezone.utc)
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expire_minutes)

        to_encode = {
            "sub": str(user.id),
            "username": user.username,
            "role": user.role,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Optional[dict]:
        """Проверка JWT токена. Возвращает claims или None."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            return None


def get_auth_service(request: Request) -> AuthService:
    """Dependency: сервис аутентификации текущего приложения."""
    return request.app.state.auth_service


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> dict:
    """Получение проверенных claims из bearer токена."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = auth_service.verify_token(credentials.credentials)
    if payload is None or payload.get("sub") is None or payload.get("role") is None:
        raise credentials_exception

    return payload


def require_role(*roles: str) -> Callable[..., dict]:
    """
    Фабрика dependency для проверки роли.

    Args:
        roles: Допустимые роли

    Returns:
        Dependency, возвращающая claims при совпадении роли
    """

    def checker(claims: dict = Depends(get_current_claims)) -> dict:
        if claims["role"] not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Not enough permissions"
            )
        return claims

    return checker
