"""
Настройка логирования приложения.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Настраивает корневой логгер.

    Повторный вызов только меняет уровень, не дублируя обработчики.

    Args:
        level: Имя уровня логирования (DEBUG, INFO, WARNING...)
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())
