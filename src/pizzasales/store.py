"""TableStore: 基底テーブルのスナップショット保持."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from pizzasales._messages import format_error
from pizzasales.exceptions import MappingError, MissingTableError, UnknownTableError
from pizzasales.mapper.factory import create_mapper
from pizzasales.mapper.protocol import RowMapper
from pizzasales.models import Order, OrderDetail, Pizza, PizzaType

logger = logging.getLogger(__name__)


class TableName(Enum):
    """基底テーブル.

    各メンバーはテーブル名とレコード型の組を持つ。
    """

    ORDERS = ("orders", Order)
    ORDER_DETAILS = ("order_details", OrderDetail)
    PIZZAS = ("pizzas", Pizza)
    PIZZA_TYPES = ("pizza_types", PizzaType)

    def __init__(self, table_id: str, record_type: type) -> None:
        self._table_id = table_id
        self._record_type = record_type

    @property
    def table_id(self) -> str:
        """テーブル名を返す."""
        return self._table_id

    @property
    def record_type(self) -> type:
        """レコード型を返す."""
        return self._record_type

    @classmethod
    def resolve(cls, table: TableName | str) -> TableName:
        """テーブル名文字列を TableName に解決する.

        Raises:
            UnknownTableError: 4つの基底テーブル以外の名前の場合

        """
        if isinstance(table, TableName):
            return table
        for member in cls:
            if member.table_id == table:
                return member
        raise UnknownTableError(format_error("unknown_table", table=table))


class TableStore:
    """4つの基底テーブルの不変スナップショットを保持する.

    ``load`` はテーブル単位の全置換で、変換済みのタプルを差し替える
    （copy-on-write）。``load`` 同士はロックで直列化され、``get`` は
    差し替え前後いずれかの完全なスナップショットを返す。

    Examples:
        >>> store = TableStore()
        >>> store.load("pizzas", [{"pizza_id": "A", "pizza_type_id": "veg",
        ...                        "size": "M", "price": "10.00"}])
        >>> store.get("pizzas")[0].price
        Decimal('10.00')

    """

    def __init__(self) -> None:
        self._tables: dict[TableName, tuple[Any, ...]] = {}
        self._write_lock = threading.Lock()

    def load(
        self,
        table: TableName | str,
        rows: Iterable[Any],
        *,
        mapper: RowMapper[Any] | Callable[..., Any] | None = None,
    ) -> None:
        """テーブルを全置換でロードする.

        全行の変換に成功した場合のみ差し替える。失敗時は以前の
        スナップショットが残る。

        Args:
            table: テーブル名
            rows: レコード型のインスタンス、またはカラム名→値の行
            mapper: カスタムマッパー（省略時はレコード型から自動生成）

        Raises:
            UnknownTableError: 未知のテーブル名の場合
            MappingError: 行をレコードに変換できない場合

        """
        name = TableName.resolve(table)
        row_mapper = create_mapper(name.record_type, mapper=mapper)
        records = tuple(row_mapper.map_rows(rows))
        for record in records:
            if not isinstance(record, name.record_type):
                msg = (
                    f"Mapper for {name.table_id!r} returned {type(record).__name__}, "
                    f"expected {name.record_type.__name__}"
                )
                raise MappingError(msg)
        with self._write_lock:
            self._tables[name] = records
        logger.info("Loaded %d rows into %s", len(records), name.table_id)

    def get(self, table: TableName | str) -> tuple[Any, ...]:
        """テーブルの現在のスナップショットを返す.

        Raises:
            UnknownTableError: 未知のテーブル名の場合
            MissingTableError: テーブルが未ロードの場合

        """
        name = TableName.resolve(table)
        try:
            return self._tables[name]
        except KeyError:
            raise MissingTableError(format_error("missing_table", table=name.table_id)) from None

    def is_loaded(self, table: TableName | str) -> bool:
        """テーブルがロード済みかを判定する."""
        return TableName.resolve(table) in self._tables

    def clear(self) -> None:
        """全テーブルを破棄する."""
        with self._write_lock:
            self._tables = {}
