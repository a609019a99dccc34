"""create_mapper: レコード型とマッパー指定から RowMapper を選ぶ."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import is_dataclass
from typing import Any

from pizzasales.mapper.manual import ManualMapper
from pizzasales.mapper.protocol import RowMapper


def create_mapper(
    entity_cls: type,
    *,
    mapper: RowMapper[Any] | Callable[..., Any] | None = None,
) -> RowMapper[Any]:
    """行をレコードに変換するマッパーを返す.

    ``mapper`` の指定が優先される。省略時はレコード型から判定する
    （dataclass は ``DataclassMapper``、Pydantic モデルは ``PydanticMapper``）。

    Args:
        entity_cls: 変換先のレコード型
        mapper: RowMapper インスタンス、行変換関数、または None

    Returns:
        RowMapper プロトコルを満たすマッパー

    Raises:
        TypeError: ``mapper`` がマッパーでも関数でもない場合、または
            レコード型からマッパーを判定できない場合

    """
    match mapper:
        case None:
            pass
        case RowMapper():
            return mapper
        case _ if callable(mapper):
            return ManualMapper(mapper)
        case _:
            msg = (
                f"mapper must be a RowMapper or a callable, "
                f"got {type(mapper).__name__} for {entity_cls.__name__}"
            )
            raise TypeError(msg)

    if is_dataclass(entity_cls):
        from pizzasales.mapper.dataclass import DataclassMapper

        return DataclassMapper(entity_cls)

    if hasattr(entity_cls, "model_validate"):
        from pizzasales.mapper.pydantic import PydanticMapper

        return PydanticMapper(entity_cls)

    msg = (
        f"Cannot create mapper for {entity_cls.__name__}. "
        f"Use a dataclass or Pydantic model, or pass mapper="
    )
    raise TypeError(msg)
