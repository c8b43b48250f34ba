"""
Базовая схема для входящих и исходящих данных API.
"""

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, model_validator


def field_key(name: str) -> str:
    """
    Ключ сопоставления имени поля: без подчеркиваний и без учета регистра.

    Example:
        "CategoryId", "categoryid", "CATEGORY_ID" -> "categoryid"
    """
    return name.replace("_", "").lower()


def normalize_keys(data: Any, field_names: Iterable[str]) -> Any:
    """
    Приводит ключи словаря к именам полей схемы.

    Неизвестные ключи и не-словари возвращаются как есть.
    """
    if not isinstance(data, dict):
        return data

    lookup = {field_key(name): name for name in field_names}
    return {
        lookup.get(field_key(key), key) if isinstance(key, str) else key: value
        for key, value in data.items()
    }


class ShopModel(BaseModel):
    """
    Базовая схема.

    Принимает имена полей в любом регистре (Title, TITLE, categoryId,
    categoryid) и читает атрибуты ORM моделей.
    """

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def normalize_field_names(cls, data: Any) -> Any:
        return normalize_keys(data, cls.model_fields)
