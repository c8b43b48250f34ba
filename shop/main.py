"""
Главный модуль FastAPI приложения SHOP API.

Содержит фабрику приложения: конфигурацию, middleware, обработчики
ошибок и роутеры.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shop.api.errors import register_exception_handlers
from shop.api.v1.routers import api_router
from shop.core.auth import AuthService
from shop.core.config import Settings, get_settings
from shop.core.logging import setup_logging
from shop.db.database import build_engine, build_session_factory
from shop.db.models import Base

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Создает экземпляр приложения.

    Движок БД, фабрика сессий и сервис аутентификации создаются один раз
    и хранятся в app.state; обработчики получают их через dependencies.

    Args:
        settings: Настройки (по умолчанию читаются из окружения)

    Returns:
        FastAPI: Настроенное приложение
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Создает таблицы при запуске и освобождает соединения при остановке."""
        if settings.CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
            logger.info("Database schema is ready")
        yield
        engine.dispose()

    app = FastAPI(
        title="SHOP API",
        description="API магазина: категории, товары и пользователи",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.auth_service = AuthService(settings)

    # Настройка CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/healthz")
    def healthz():
        """
        Health check endpoint для мониторинга состояния приложения.

        Returns:
            dict: Статус приложения
        """
        return {"status": "ok", "service": "SHOP API", "version": "1.0.0"}

    # Подключение API роутеров
    app.include_router(api_router, prefix="/v1")

    return app
