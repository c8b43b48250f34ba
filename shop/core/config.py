"""
Конфигурация приложения.

Содержит настройки подключения к БД, параметры JWT токенов,
HTTP кэширования и логирования.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Настройки приложения, загружаемые из переменных окружения.

    Attributes:
        DATABASE_URL: URL подключения к базе данных
        DEBUG: Режим отладки (логирование SQL запросов)
        SECRET_KEY: Ключ подписи JWT токенов
        JWT_ALGORITHM: Алгоритм подписи JWT
        ACCESS_TOKEN_EXPIRE_MINUTES: Время жизни токена в минутах
        CACHE_MAX_AGE: Время жизни HTTP кэша списка категорий в секундах
        LOG_LEVEL: Уровень логирования
        CORS_ORIGINS: Разрешенные источники CORS (через запятую)
        CREATE_TABLES: Создавать таблицы при запуске приложения
    """

    DATABASE_URL: str = Field(
        default="sqlite:///./shop.db",
        description="URL подключения к базе данных",
    )
    DEBUG: bool = Field(default=False, description="Режим отладки")

    # Настройки JWT
    SECRET_KEY: str = Field(
        default="change-me-in-production", description="Ключ подписи JWT токенов"
    )
    JWT_ALGORITHM: str = Field(default="HS256", description="Алгоритм подписи JWT")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=120, description="Время жизни токена доступа в минутах"
    )

    # HTTP кэширование
    CACHE_MAX_AGE: int = Field(
        default=30, description="max-age для списка категорий в секундах"
    )

    LOG_LEVEL: str = Field(default="INFO", description="Уровень логирования")
    CORS_ORIGINS: str = Field(
        default="*", description="Разрешенные источники CORS (через запятую)"
    )
    CREATE_TABLES: bool = Field(
        default=True, description="Создавать таблицы при запуске"
    )

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        """Список разрешенных источников CORS."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Создает настройки из окружения."""
    return Settings()
