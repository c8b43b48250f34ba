"""
Модели базы данных.

Импортирует все модели для корректной работы SQLAlchemy.
"""

from .base import Base
from .category import Category
from .product import Product
from .user import ROLE_EMPLOYEE, ROLE_MANAGER, User

__all__ = [
    "Base",
    "Category",
    "Product",
    "User",
    "ROLE_EMPLOYEE",
    "ROLE_MANAGER",
]
