"""
API endpoints для работы с товарами.

Товары всегда возвращаются вместе с категорией.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from shop.api.errors import parse_payload
from shop.core.auth import require_role
from shop.db.database import get_db
from shop.db.models import ROLE_EMPLOYEE, Category, Product
from shop.schemas.product import ProductIn, ProductOut

logger = logging.getLogger(__name__)

router = APIRouter()


def _products_query():
    return select(Product).options(joinedload(Product.category)).order_by(Product.id)


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    """Получить список всех товаров с категориями."""
    return db.scalars(_products_query()).all()


@router.get("/categories/{category_id}", response_model=List[ProductOut])
def list_products_by_category(category_id: int, db: Session = Depends(get_db)):
    """
    Получить товары категории.

    Args:
        category_id: ID категории

    Returns:
        List[ProductOut]: Товары, у которых category_id совпадает с заданным
    """
    stmt = _products_query().where(Product.category_id == category_id)
    return db.scalars(stmt).all()


@router.get("/{product_id}", response_model=Optional[ProductOut])
def get_product(product_id: int, db: Session = Depends(get_db)):
    """Получить товар по ID (null, если товар не найден)."""
    return db.scalar(_products_query().where(Product.id == product_id))


@router.post("", response_model=ProductOut)
def create_product(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    claims: dict = Depends(require_role(ROLE_EMPLOYEE)),
):
    """
    Создать товар.

    Raises:
        RequestValidationError: Некорректные данные или несуществующая категория
        HTTPException: 400 при ошибке сохранения
    """
    data = parse_payload(ProductIn, payload)

    if db.get(Category, data.category_id) is None:
        raise RequestValidationError(
            [{"loc": ("category_id",), "msg": "Category does not exist", "type": "value_error"}]
        )

    product = Product(
        title=data.title,
        description=data.description,
        price=data.price,
        image=data.image,
        category_id=data.category_id,
    )
    try:
        db.add(product)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not create product %r", data.title)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Could not create product")

    logger.info("Product %s created by %s", product.id, claims.get("username"))
    return db.scalar(_products_query().where(Product.id == product.id))
