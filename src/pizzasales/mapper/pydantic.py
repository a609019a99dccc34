"""PydanticMapper: Pydantic BaseModel 用のマッパー."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from pizzasales.exceptions import MappingError


class PydanticMapper:
    """Pydantic BaseModel 用のマッパー.

    バリデーション失敗は ``MappingError`` として送出する。
    """

    def __init__(self, entity_cls: type) -> None:
        if not hasattr(entity_cls, "model_validate"):
            msg = f"{entity_cls} is not a Pydantic BaseModel"
            raise TypeError(msg)
        self.entity_cls = entity_cls

    def map_row(self, row: Mapping[str, Any]) -> Any:
        """1行をレコードに変換."""
        if isinstance(row, self.entity_cls):
            return row
        try:
            return self.entity_cls.model_validate(row)
        except ValidationError as e:
            msg = f"Invalid {self.entity_cls.__name__} row {row!r}: {e}"
            raise MappingError(msg) from e

    def map_rows(self, rows: Iterable[Mapping[str, Any]]) -> list[Any]:
        """複数行をレコードのリストに変換."""
        return [self.map_row(row) for row in rows]
