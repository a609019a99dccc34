"""集計エンジン: グループ化と集計関数、並べ替え、重複除去."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from pizzasales._messages import format_error
from pizzasales.columns import as_dict, column_getter
from pizzasales.exceptions import InvalidAggregateInputError, InvalidGroupKeyError

Selector = str | Callable[[Any], Any]
GroupKey = str | Sequence[str] | Mapping[str, Selector]


class AggregateFunction(Enum):
    """集計関数."""

    COUNT = "count"
    SUM = "sum"
    AVG = "avg"


@dataclass(frozen=True)
class Aggregate:
    """出力カラム1つ分の集計設定.

    ``column`` が None の COUNT は ``COUNT(*)`` として全行を数える。
    カラム指定時は SQL と同様に None の値を無視する。
    """

    function: AggregateFunction
    column: Selector | None = None
    digits: int | None = None
    """AVG の丸め桁数. None の場合は丸めない."""

    def __post_init__(self) -> None:
        if self.column is None and self.function is not AggregateFunction.COUNT:
            msg = format_error("invalid_aggregate_input", function=self.function.value)
            raise InvalidAggregateInputError(msg)
        if self.digits is not None and self.function is not AggregateFunction.AVG:
            msg = f"digits is only supported for avg, not {self.function.value}"
            raise ValueError(msg)


def count(column: Selector | None = None) -> Aggregate:
    """COUNT の設定を生成する. ``column`` 省略時は ``COUNT(*)``."""
    return Aggregate(AggregateFunction.COUNT, column)


def sum_(column: Selector) -> Aggregate:
    """SUM の設定を生成する."""
    return Aggregate(AggregateFunction.SUM, column)


def avg(column: Selector, digits: int | None = None) -> Aggregate:
    """AVG の設定を生成する. ``digits`` 指定時は四捨五入する."""
    return Aggregate(AggregateFunction.AVG, column, digits)


def round_half_up(value: Any, digits: int) -> Any:
    """SQL の ``ROUND`` と同様に四捨五入する.

    Decimal は ROUND_HALF_UP で丸める。float は組み込みの ``round`` を使う。
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return round(value, digits)


def nulls_first(value: Any) -> tuple[bool, Any]:
    """並び順キーを返す. None は昇順で先頭、降順で末尾になる（MySQL と同じ）."""
    return (value is not None, value)


class _Accumulator:
    """1グループ・1集計カラム分の途中状態."""

    __slots__ = ("count", "total")

    def __init__(self) -> None:
        self.count = 0
        self.total: Any = None

    def add(self, value: Any) -> None:
        self.count += 1
        self.total = value if self.total is None else self.total + value

    def result(self, aggregate: Aggregate) -> Any:
        match aggregate.function:
            case AggregateFunction.COUNT:
                return self.count
            case AggregateFunction.SUM:
                return self.total
            case AggregateFunction.AVG:
                if self.count == 0:
                    return None
                mean = self.total / self.count
                if aggregate.digits is None:
                    return mean
                return round_half_up(mean, aggregate.digits)


def _key_getters(key: GroupKey) -> list[tuple[str, Callable[[Any], Any]]]:
    """グループキー指定を (出力カラム名, 値取得関数) のリストに正規化する."""
    if isinstance(key, str):
        selectors: Mapping[str, Selector] = {key: key}
    elif isinstance(key, Mapping):
        selectors = key
    elif isinstance(key, Sequence) and all(isinstance(name, str) for name in key):
        selectors = {name: name for name in key}
    else:
        # 導出キーは出力カラム名とのマッピングで指定する
        raise InvalidGroupKeyError(format_error("invalid_group_key", key=key))
    if not selectors:
        raise InvalidGroupKeyError(format_error("invalid_group_key", key=key))
    return [
        (
            name,
            column_getter(selector, error=InvalidGroupKeyError, message_key="invalid_group_key"),
        )
        for name, selector in selectors.items()
    ]


def group_by(
    rows: Iterable[Any],
    key: GroupKey,
    aggregations: Mapping[str, Aggregate],
) -> list[dict[str, Any]]:
    """行をキーでグループ化し、グループごとに集計する.

    Args:
        rows: 入力行
        key: カラム名、カラム名のシーケンス、または出力カラム名→セレクタの
            マッピング（月・曜日などの導出キー用）
        aggregations: 出力カラム名→集計設定

    Returns:
        キーごとに1行の dict のリスト（キーカラム、集計カラムの順）。
        グループは初出順に並ぶ。並び順が必要な場合は ``order_by`` を使う。

    Raises:
        InvalidGroupKeyError: キーのカラムが行に存在しない場合
        InvalidAggregateInputError: 集計入力のカラムが行に存在しない場合

    Examples:
        >>> group_by(order_details, "pizza_id", {"count": count()})
        [{'pizza_id': 'A', 'count': 2}, {'pizza_id': 'B', 'count': 1}]

    """
    keys = _key_getters(key)
    inputs = [
        (
            name,
            aggregate,
            None
            if aggregate.column is None
            else column_getter(
                aggregate.column,
                error=InvalidAggregateInputError,
                message_key="invalid_aggregate_input",
            ),
        )
        for name, aggregate in aggregations.items()
    ]

    groups: dict[tuple[Any, ...], list[_Accumulator]] = {}
    for row in rows:
        group_key = tuple(get(row) for _, get in keys)
        accumulators = groups.get(group_key)
        if accumulators is None:
            accumulators = groups[group_key] = [_Accumulator() for _ in inputs]
        for accumulator, (_, aggregate, get_value) in zip(accumulators, inputs):
            value = None if get_value is None else get_value(row)
            if aggregate.function is AggregateFunction.COUNT:
                if get_value is None or value is not None:
                    accumulator.count += 1
            elif value is not None:
                accumulator.add(value)

    result: list[dict[str, Any]] = []
    for group_key, accumulators in groups.items():
        record = {name: value for (name, _), value in zip(keys, group_key)}
        for accumulator, (name, aggregate, _) in zip(accumulators, inputs):
            record[name] = accumulator.result(aggregate)
        result.append(record)
    return result


def order_by(
    rows: Iterable[Any],
    *columns: Selector,
    descending: bool = False,
) -> list[Any]:
    """行を安定ソートした新しいリストを返す.

    同じキーの行は入力順を保つ。None は昇順で先頭、降順で末尾に並ぶ。

    Raises:
        InvalidGroupKeyError: 並び順カラムが行に存在しない場合

    """
    getters = [
        column_getter(column, error=InvalidGroupKeyError, message_key="invalid_group_key")
        for column in columns
    ]
    return sorted(
        rows,
        key=lambda row: tuple(nulls_first(get(row)) for get in getters),
        reverse=descending,
    )


def distinct(rows: Iterable[Any], columns: Sequence[str] | None = None) -> list[dict[str, Any]]:
    """``SELECT DISTINCT`` 相当. 指定カラムに射影し、重複を初出優先で除去する.

    ``columns`` が None の場合は全カラムで比較する。
    """
    getters = (
        None
        if columns is None
        else [
            (
                column,
                column_getter(column, error=InvalidGroupKeyError, message_key="invalid_group_key"),
            )
            for column in columns
        ]
    )
    seen: set[tuple[Any, ...]] = set()
    result: list[dict[str, Any]] = []
    for row in rows:
        if getters is None:
            record = as_dict(row)
        else:
            record = {column: get(row) for column, get in getters}
        marker = tuple(record.items())
        if marker in seen:
            continue
        seen.add(marker)
        result.append(record)
    return result
