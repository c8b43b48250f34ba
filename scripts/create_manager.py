#!/usr/bin/env python3
"""
Скрипт для создания менеджера в базе данных.

Регистрация через API всегда создает сотрудника, поэтому первый
менеджер создается этим скриптом.
"""

import argparse
import sys

from sqlalchemy import select
from sqlalchemy.orm import Session

from shop.core.auth import AuthService
from shop.core.config import get_settings
from shop.db.database import build_engine, build_session_factory
from shop.db.models import ROLE_MANAGER, Base, User


def create_manager(db: Session, username: str, password: str) -> User:
    """
    Создает менеджера или сбрасывает пароль и роль существующего пользователя.

    Args:
        db: Сессия базы данных
        username: Имя пользователя
        password: Пароль

    Returns:
        User: Пользователь с ролью manager
    """
    password_hash = AuthService.get_password_hash(password)

    user = db.scalar(select(User).where(User.username == username))
    if user is None:
        user = User(username=username, password_hash=password_hash, role=ROLE_MANAGER)
        db.add(user)
    else:
        user.password_hash = password_hash
        user.role = ROLE_MANAGER

    db.commit()
    db.refresh(user)
    return user


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Создание менеджера магазина")
    parser.add_argument("--username", default="manager", help="Имя пользователя")
    parser.add_argument("--password", required=True, help="Пароль")
    args = parser.parse_args(argv)

    engine = build_engine(get_settings())
    Base.metadata.create_all(bind=engine)
    SessionLocal = build_session_factory(engine)

    with SessionLocal() as db:
        user = create_manager(db, args.username, args.password)
        print(f"Менеджер готов: id={user.id}, username={user.username}")

    engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
