"""
API endpoints для работы с категориями товаров.

Содержит CRUD операции над категориями. Чтение и создание открыты
всем, изменение и удаление доступны только сотрудникам.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shop.api.errors import parse_payload, payload_id
from shop.core.auth import require_role
from shop.db.database import get_db
from shop.db.models import ROLE_EMPLOYEE, Category, Product
from shop.schemas.category import CategoryIn, CategoryOut

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Category not found"


@router.get("", response_model=List[CategoryOut])
def list_categories(request: Request, response: Response, db: Session = Depends(get_db)):
    """
    Получить список всех категорий.

    Ответ разрешено кэшировать на CACHE_MAX_AGE секунд
    (отдельно для каждого User-Agent).

    Example:
        [
            {"id": 1, "title": "Shoes"},
            {"id": 2, "title": "Electronics"}
        ]
    """
    max_age = request.app.state.settings.CACHE_MAX_AGE
    response.headers["Cache-Control"] = f"public, max-age={max_age}"
    response.headers["Vary"] = "User-Agent"

    return db.scalars(select(Category).order_by(Category.id)).all()


@router.get("/{category_id}", response_model=Optional[CategoryOut])
def get_category(category_id: int, db: Session = Depends(get_db)):
    """
    Получить категорию по ID.

    Returns:
        CategoryOut или null, если категория не найдена
    """
    return db.get(Category, category_id)


@router.post("", response_model=CategoryOut)
def create_category(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Создать категорию.

    Идентификатор назначается базой данных, id из тела игнорируется.

    Raises:
        HTTPException: 400 при ошибке сохранения
    """
    data = parse_payload(CategoryIn, payload)

    category = Category(title=data.title)
    try:
        db.add(category)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not create category %r", data.title)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Could not create category")

    db.refresh(category)
    logger.info("Category %s created", category.id)
    return category


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: int,
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    claims: dict = Depends(require_role(ROLE_EMPLOYEE)),
):
    """
    Полностью заменить категорию.

    Args:
        category_id: ID категории из пути, должен совпадать с id в теле

    Raises:
        HTTPException: 404 если id не совпадают или категории нет,
            400 при ошибке сохранения
    """
    if payload_id(payload) != category_id:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    data = parse_payload(CategoryIn, payload)

    category = db.get(Category, category_id)
    if category is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    category.title = data.title
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not update category %s", category_id)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Could not update category")

    db.refresh(category)
    logger.info("Category %s updated by %s", category_id, claims.get("username"))
    return category


@router.delete("/{category_id}")
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    claims: dict = Depends(require_role(ROLE_EMPLOYEE)),
):
    """
    Удалить категорию.

    Категорию, на которую ссылаются товары, удалить нельзя.

    Raises:
        HTTPException: 404 если категории нет, 409 если в ней есть товары,
            400 при ошибке удаления
    """
    category = db.get(Category, category_id)
    if category is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    products_count = db.scalar(
        select(func.count()).select_from(Product).where(Product.category_id == category_id)
    )
    if products_count:
        raise HTTPException(
            status.HTTP_409_CONFLICT,
            detail=f"Category has {products_count} product(s) and cannot be deleted",
        )

    try:
        db.delete(category)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not delete category %s", category_id)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Could not delete category")

    logger.info("Category %s deleted by %s", category_id, claims.get("username"))
    return {"message": "Category deleted"}
