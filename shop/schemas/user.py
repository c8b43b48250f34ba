"""
Pydantic схемы пользователей и аутентификации.
"""

from typing import Optional

from pydantic import Field

from .base import ShopModel


class UserIn(ShopModel):
    """Схема для регистрации и обновления пользователя."""

    id: Optional[int] = None
    username: str = Field(..., min_length=1, max_length=100, description="Имя пользователя")
    password: str = Field(..., min_length=1, max_length=72, description="Пароль")
    role: Optional[str] = Field(None, max_length=32, description="Роль пользователя")


class UserOut(ShopModel):
    """
    Схема для вывода пользователя.

    Пароль никогда не возвращается: поле всегда пустое.
    """

    id: int
    username: str
    password: str = ""
    role: str


class UserUpdate(UserIn):
    """Схема для полной замены пользователя: роль обязательна."""

    role: str = Field(..., min_length=1, max_length=32, description="Роль пользователя")


class LoginRequest(ShopModel):
    """Схема для входа в систему."""

    username: str = Field(..., description="Имя пользователя")
    password: str = Field(..., description="Пароль")


class LoginResponse(ShopModel):
    """Схема ответа при входе в систему."""

    user: UserOut
    token: str
