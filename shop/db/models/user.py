"""
Модель пользователя для системы аутентификации.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

ROLE_EMPLOYEE = "employee"
ROLE_MANAGER = "manager"


class User(Base):
    """
    Модель пользователя.

    Attributes:
        id: Уникальный идентификатор пользователя
        username: Имя пользователя (уникальное)
        password_hash: Хеш пароля (bcrypt)
        role: Роль пользователя (employee/manager)
    """

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(
        String(100), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(32), nullable=False, default=ROLE_EMPLOYEE
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
