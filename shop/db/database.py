"""
Конфигурация базы данных.

Создает движок SQLAlchemy и фабрику сессий из настроек приложения.
Фабрика хранится в состоянии приложения и выдает одну сессию на запрос.
"""

from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from shop.core.config import Settings


def build_engine(settings: Settings) -> Engine:
    """
    Создает движок SQLAlchemy.

    Args:
        settings: Настройки приложения

    Returns:
        Engine: Движок, общий для всех запросов
    """
    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        # Сессии живут в потоках пула FastAPI
        connect_args["check_same_thread"] = False

    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,  # Проверка соединения перед использованием
        echo=bool(settings.DEBUG),  # Логирование SQL запросов в режиме отладки
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    """Фабрика сессий базы данных."""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency для получения сессии базы данных.

    Yields:
        Session: Сессия SQLAlchemy

    Note:
        Незафиксированные изменения откатываются при закрытии сессии
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
