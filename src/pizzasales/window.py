"""ウィンドウエンジン: 行を畳み込まないウィンドウ関数.

いずれの関数も入力の全行を入力順のまま返し、各行に結果カラムを1つ追加する。
行の並べ替えが必要な場合は呼び出し側で ``order_by`` を適用する。
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import groupby
from typing import Any

from pizzasales.aggregate import Selector, nulls_first, round_half_up
from pizzasales.columns import as_dict, column_getter
from pizzasales.exceptions import InvalidAggregateInputError, InvalidGroupKeyError


def _key_getter(selector: Selector) -> Callable[[Any], Any]:
    return column_getter(selector, error=InvalidGroupKeyError, message_key="invalid_group_key")


def _value_getter(selector: Selector) -> Callable[[Any], Any]:
    return column_getter(
        selector, error=InvalidAggregateInputError, message_key="invalid_aggregate_input"
    )


def _partitions(rows: list[Any], partition_key: Selector | None) -> list[list[int]]:
    """パーティションごとの行インデックス（入力順）を返す."""
    if partition_key is None:
        return [list(range(len(rows)))]
    get_partition = _key_getter(partition_key)
    partitions: dict[Any, list[int]] = {}
    for index, row in enumerate(rows):
        partitions.setdefault(get_partition(row), []).append(index)
    return list(partitions.values())


def _ordered(indexes: list[int], order_keys: list[Any]) -> list[int]:
    """並び順キーで安定ソートする. 同順位は入力順、None は先頭."""
    return sorted(indexes, key=lambda index: nulls_first(order_keys[index]))


def _attach(rows: list[Any], output: str, results: list[Any]) -> list[dict[str, Any]]:
    return [{**as_dict(row), output: result} for row, result in zip(rows, results)]


def rolling_sum(
    rows: Iterable[Any],
    order_key: Selector,
    value: Selector,
    *,
    partition_key: Selector | None = None,
    output: str = "rolling_total",
) -> list[dict[str, Any]]:
    """``SUM(value) OVER ([PARTITION BY ...] ORDER BY order_key)`` 相当の累計.

    並び順キーが同じ行（ピア）は、ピア全体を含めた同じ累計値を受け取る。
    None の値は加算しない。

    Args:
        rows: 入力行
        order_key: 並び順のカラム名またはセレクタ
        value: 加算する値のカラム名またはセレクタ
        partition_key: パーティションのカラム名またはセレクタ
        output: 累計を格納する出力カラム名

    Returns:
        入力順の行（元のカラム + 累計カラム）

    Raises:
        InvalidGroupKeyError: 並び順・パーティションのカラムが存在しない場合
        InvalidAggregateInputError: 値のカラムが存在しない場合

    """
    rows = list(rows)
    get_order = _key_getter(order_key)
    get_value = _value_getter(value)
    order_keys = [get_order(row) for row in rows]
    values = [get_value(row) for row in rows]

    totals: list[Any] = [None] * len(rows)
    for partition in _partitions(rows, partition_key):
        running: Any = None
        ordered = _ordered(partition, order_keys)
        for _, group in groupby(ordered, key=lambda index: order_keys[index]):
            peers = list(group)
            for index in peers:
                if values[index] is not None:
                    running = values[index] if running is None else running + values[index]
            for index in peers:
                totals[index] = running
    return _attach(rows, output, totals)


def row_number(
    rows: Iterable[Any],
    order_key: Selector,
    *,
    partition_key: Selector | None = None,
    output: str = "row_number",
) -> list[dict[str, Any]]:
    """``ROW_NUMBER() OVER ([PARTITION BY ...] ORDER BY order_key)`` 相当.

    パーティションごとに 1 から連番を振る。同順位は入力順で決める。
    """
    rows = list(rows)
    get_order = _key_getter(order_key)
    order_keys = [get_order(row) for row in rows]

    numbers: list[Any] = [None] * len(rows)
    for partition in _partitions(rows, partition_key):
        for number, index in enumerate(_ordered(partition, order_keys), start=1):
            numbers[index] = number
    return _attach(rows, output, numbers)


def row_number_unordered(rows: Iterable[Any], *, output: str = "row_number") -> list[dict[str, Any]]:
    """``ROW_NUMBER() OVER ()`` 相当. 入力順に 1 から連番を振る."""
    rows = list(rows)
    return _attach(rows, output, list(range(1, len(rows) + 1)))


def avg_over(
    rows: Iterable[Any],
    partition_key: Selector,
    value: Selector,
    *,
    digits: int | None = 2,
    output: str = "avg_price",
) -> list[dict[str, Any]]:
    """``ROUND(AVG(value) OVER (PARTITION BY partition_key), digits)`` 相当.

    各行にその行が属するパーティションの平均値を付与する。
    ``digits`` が None の場合は丸めない。
    """
    rows = list(rows)
    get_value = _value_getter(value)
    values = [get_value(row) for row in rows]

    averages: list[Any] = [None] * len(rows)
    for partition in _partitions(rows, partition_key):
        present = [values[index] for index in partition if values[index] is not None]
        mean = sum(present[1:], present[0]) / len(present) if present else None
        if mean is not None and digits is not None:
            mean = round_half_up(mean, digits)
        for index in partition:
            averages[index] = mean
    return _attach(rows, output, averages)
