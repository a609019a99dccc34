"""RowMapper プロトコル定義."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RowMapper(Protocol[T]):
    """カラム名→値の行をレコードに変換するマッパーのインターフェース."""

    def map_row(self, row: Mapping[str, Any]) -> T:
        """1行をレコードに変換."""
        ...

    def map_rows(self, rows: Iterable[Mapping[str, Any]]) -> list[T]:
        """複数行をレコードのリストに変換."""
        ...
