"""
Pydantic схемы товаров.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer

from .base import ShopModel
from .category import CategoryOut


class ProductIn(ShopModel):
    """Схема для создания товара."""

    id: Optional[int] = None
    title: str = Field(..., min_length=3, max_length=120, description="Название товара")
    description: str = Field(..., min_length=3, max_length=900, description="Описание товара")
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Цена")
    image: str = Field(..., min_length=1, max_length=1024, description="Ссылка на изображение")
    category_id: int = Field(..., gt=0, description="ID категории")


class ProductOut(ShopModel):
    """Схема для вывода товара вместе с категорией."""

    id: int
    title: str
    description: str
    price: Decimal
    image: str
    category_id: int
    category: Optional[CategoryOut] = None

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
