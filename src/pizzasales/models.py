"""基底テーブルのレコード型と結合結果の行型."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    """基底テーブルのレコード. 生成後は変更不可."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class Order(_Record):
    """``orders`` の1行.

    公開 CSV のカラム名 ``date`` / ``time`` も受け付ける。
    """

    order_id: int
    order_date: dt.date = Field(validation_alias=AliasChoices("order_date", "date"))
    order_time: dt.time = Field(validation_alias=AliasChoices("order_time", "time"))


class OrderDetail(_Record):
    """``order_details`` の1行."""

    order_details_id: int
    order_id: int
    pizza_id: str
    quantity: int = Field(gt=0)


class Pizza(_Record):
    """``pizzas`` の1行."""

    pizza_id: str
    pizza_type_id: str
    size: str
    price: Decimal = Field(gt=0)


class PizzaType(_Record):
    """``pizza_types`` の1行."""

    pizza_type_id: str
    name: str
    category: str
    ingredients: tuple[str, ...] = ()

    @field_validator("ingredients", mode="before")
    @classmethod
    def _split_ingredients(cls, value: Any) -> Any:
        """CSV 形式のカンマ区切り文字列を分割する."""
        if isinstance(value, str):
            return tuple(item.strip() for item in value.split(",") if item.strip())
        return value


@dataclass(frozen=True)
class JoinedRow:
    """order_details ⋈ orders ⋈ pizzas ⋈ pizza_types の1行."""

    order_details_id: int
    order_id: int
    order_date: dt.date
    order_time: dt.time
    pizza_id: str
    pizza_type_id: str
    name: str
    category: str
    size: str
    quantity: int
    price: Decimal
    total_price: Decimal
    """``quantity * price``."""


@dataclass(frozen=True)
class MenuRow:
    """pizza_types ⋈ pizzas の1行."""

    pizza_type_id: str
    name: str
    category: str
    ingredients: tuple[str, ...]
    pizza_id: str
    size: str
    price: Decimal
