"""ManualMapper: 行変換関数をラップするマッパー."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pizzasales.exceptions import MappingError

# 変換関数がこれらを送出した場合は行の不備とみなす
# (pydantic の ValidationError は ValueError のサブクラス)
_ROW_ERRORS = (KeyError, IndexError, TypeError, ValueError)


class ManualMapper:
    """行変換関数をラップするマッパー.

    CSV 以外の形式（タプルなど）の行をレコードに変換する場合に使う。
    変換関数が行の不備で失敗した場合は ``MappingError`` を送出する。

    Examples:
        >>> mapper = ManualMapper(lambda row: Pizza(pizza_id=row[0], ...))
        >>> store.load("pizzas", rows, mapper=mapper)

    """

    def __init__(self, func: Callable[[Any], Any]) -> None:
        if not callable(func):
            msg = f"ManualMapper requires a callable, got {type(func).__name__}"
            raise TypeError(msg)
        self._func = func

    def map_row(self, row: Any) -> Any:
        """1行をレコードに変換."""
        try:
            return self._func(row)
        except _ROW_ERRORS as e:
            msg = f"Cannot map row {row!r}: {e}"
            raise MappingError(msg) from e

    def map_rows(self, rows: Iterable[Any]) -> list[Any]:
        """複数行をレコードのリストに変換."""
        return [self.map_row(row) for row in rows]
