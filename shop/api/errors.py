"""
Обработка ошибок API.

Явная валидация тела запроса и обработчики исключений, приводящие
все ошибки к виду {"message": ...}.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Type, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shop.schemas.base import normalize_keys

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "One or more validation errors occurred."

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_payload(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """
    Валидирует тело запроса по схеме.

    Args:
        schema: Pydantic схема
        payload: Сырое тело запроса

    Returns:
        Экземпляр схемы

    Raises:
        RequestValidationError: Если данные не прошли валидацию
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


def payload_id(payload: Any) -> Any:
    """Идентификатор из тела запроса (ключ id в любом регистре)."""
    return normalize_keys(payload, ["id"]).get("id") if isinstance(payload, dict) else None


def validation_errors(errors: List[dict]) -> Dict[str, List[str]]:
    """
    Группирует ошибки валидации по полям.

    Example:
        {"title": ["String should have at least 3 characters"]}
    """
    grouped: Dict[str, List[str]] = defaultdict(list)
    for error in errors:
        # Первый элемент loc - источник ("body"), если он указан
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        grouped[field].append(error.get("msg", "Invalid value"))
    return dict(grouped)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = validation_errors(list(exc.errors()))
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": VALIDATION_MESSAGE, "errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Подключает обработчики ошибок к приложению."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
