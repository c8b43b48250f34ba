"""
Pydantic схемы категорий.
"""

from typing import Optional

from pydantic import Field

from .base import ShopModel


class CategoryIn(ShopModel):
    """Схема для создания и обновления категории."""

    id: Optional[int] = None
    title: str = Field(..., min_length=3, max_length=60, description="Название категории")


class CategoryOut(ShopModel):
    """Схема для вывода категории."""

    id: int
    title: str
