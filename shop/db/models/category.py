"""
Модель категории товаров.
"""

from typing import List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Category(Base):
    """
    Модель категории товаров.

    Attributes:
        id: Уникальный идентификатор категории
        title: Название категории (3-60 символов)
        products: Товары в этой категории
    """

    __tablename__ = "category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(60), nullable=False)

    # Без каскадного удаления: категорию с товарами удалить нельзя
    products: Mapped[List["Product"]] = relationship(
        back_populates="category", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, title='{self.title}')>"
