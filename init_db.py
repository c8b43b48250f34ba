#!/usr/bin/env python3
"""
Скрипт для инициализации базы данных.
"""

import sys

from sqlalchemy import inspect

from shop.core.config import get_settings
from shop.db.database import build_engine
from shop.db.models import Base


def init_database() -> bool:
    """Создает все таблицы в базе данных."""
    settings = get_settings()
    engine = build_engine(settings)
    print(f"Инициализация базы данных: {engine.url.render_as_string(hide_password=True)}")

    try:
        Base.metadata.create_all(bind=engine)

        tables = inspect(engine).get_table_names()
        print(f"Создано таблиц: {len(tables)}")
        for table in tables:
            print(f"  - {table}")
        return True

    except Exception as e:
        print(f"Ошибка создания таблиц: {e}")
        return False
    finally:
        engine.dispose()


if __name__ == "__main__":
    if not init_database():
        sys.exit(1)
