"""行からのカラム値の取り出し.

行は dict 等のマッピング、Pydantic モデル、dataclass のいずれでもよい。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from pizzasales._messages import format_error
from pizzasales.exceptions import PizzaSalesError

_MISSING = object()


def as_dict(row: Any) -> dict[str, Any]:
    """行をカラム名→値の dict に変換する."""
    if isinstance(row, Mapping):
        return dict(row)
    if hasattr(row, "model_dump"):
        return {name: getattr(row, name) for name in type(row).model_fields}
    if is_dataclass(row) and not isinstance(row, type):
        return {f.name: getattr(row, f.name) for f in fields(row)}
    msg = f"Cannot convert {type(row).__name__} to a column mapping"
    raise TypeError(msg)


def column_getter(
    selector: str | Callable[[Any], Any],
    *,
    error: type[PizzaSalesError],
    message_key: str,
) -> Callable[[Any], Any]:
    """カラム名またはセレクタ関数から値取得関数を生成する.

    Args:
        selector: カラム名、または行を受け取って値を返す関数
        error: カラムを解決できない場合に送出する例外クラス
        message_key: エラーメッセージのキー

    Returns:
        行を受け取って値を返す関数

    """
    if callable(selector):
        return selector

    def get(row: Any) -> Any:
        value = _lookup(row, selector)
        if value is _MISSING:
            msg = format_error(message_key, column=selector, row_type=type(row).__name__)
            raise error(msg)
        return value

    return get


def _lookup(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name, _MISSING)
    if hasattr(row, "model_dump"):
        if name not in type(row).model_fields:
            return _MISSING
        return getattr(row, name)
    if is_dataclass(row):
        if name not in {f.name for f in fields(row)}:
            return _MISSING
        return getattr(row, name)
    return _MISSING
