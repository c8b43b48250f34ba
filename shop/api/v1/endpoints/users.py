"""
API endpoints для работы с пользователями и аутентификации.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shop.api.errors import parse_payload, payload_id
from shop.core.auth import AuthService, get_auth_service, require_role
from shop.db.database import get_db
from shop.db.models import ROLE_EMPLOYEE, ROLE_MANAGER, User
from shop.schemas.user import LoginRequest, LoginResponse, UserIn, UserOut, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "User not found"
INVALID_CREDENTIALS = "Invalid username or password"


# ==================== ПОЛЬЗОВАТЕЛИ ====================


@router.get("", response_model=List[UserOut])
def list_users(
    db: Session = Depends(get_db),
    claims: dict = Depends(require_role(ROLE_MANAGER)),
):
    """Получить список пользователей (только для менеджеров)."""
    return db.scalars(select(User).order_by(User.id)).all()


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    response: Response,
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Зарегистрировать пользователя.

    Роль из запроса игнорируется: новый пользователь всегда сотрудник.

    Raises:
        HTTPException: 400 если пользователь не сохранен (например, имя занято)
    """
    data = parse_payload(UserIn, payload)

    user = User(
        username=data.username,
        password_hash=auth_service.get_password_hash(data.password),
        role=ROLE_EMPLOYEE,
    )
    try:
        db.add(user)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not create user %r", data.username)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Could not create user")

    db.refresh(user)
    logger.info("User %s (%s) registered", user.id, user.username)
    response.headers["Location"] = f"/v1/users/{user.id}"
    return user


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: int,
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
    claims: dict = Depends(require_role(ROLE_MANAGER)),
):
    """
    Полностью заменить данные пользователя, включая роль.

    Raises:
        HTTPException: 404 если id не совпадают или пользователя нет,
            400 при ошибке сохранения
    """
    if payload_id(payload) != user_id:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    data = parse_payload(UserUpdate, payload)

    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    user.username = data.username
    user.password_hash = auth_service.get_password_hash(data.password)
    user.role = data.role
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not update user %s", user_id)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Could not update user")

    db.refresh(user)
    logger.info("User %s updated by %s", user_id, claims.get("username"))
    return user


# ==================== АУТЕНТИФИКАЦИЯ ====================


@router.post("/login", response_model=LoginResponse)
def login(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Вход в систему.

    Неизвестный пользователь и неверный пароль дают одинаковый ответ.

    Returns:
        Пользователь (без пароля) и JWT токен

    Raises:
        HTTPException: 404 при неверных учетных данных
    """
    credentials = parse_payload(LoginRequest, payload)

    user = db.scalar(select(User).where(User.username == credentials.username))
    if user is None:
        auth_service.dummy_verify()
    if user is None or not auth_service.verify_password(
        credentials.password, user.password_hash
    ):
        logger.warning("Failed login attempt for username %r", credentials.username)
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=INVALID_CREDENTIALS)

    token = auth_service.create_access_token(user)
    logger.info("User %s logged in", user.username)
    return {"user": UserOut.model_validate(user), "token": token}
