"""
Модель товара.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Product(Base):
    """
    Модель товара.

    Attributes:
        id: Уникальный идентификатор товара
        title: Название товара
        description: Описание товара
        price: Цена
        image: Ссылка на изображение
        category_id: ID категории товара
        category: Связь с категорией (загружается вместе с товаром)
    """

    __tablename__ = "product"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str] = mapped_column(String(900), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("category.id", ondelete="RESTRICT"), index=True
    )

    category: Mapped["Category"] = relationship(
        back_populates="products", lazy="joined"
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, title='{self.title}')>"
