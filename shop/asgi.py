"""
ASGI точка входа.

Запуск: uvicorn shop.asgi:app
"""

from shop.main import create_app

# Приложение с настройками из окружения
app = create_app()
