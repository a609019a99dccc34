"""QueryCatalog: ピザ売上分析クエリ集."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from pizzasales import config
from pizzasales._messages import format_error
from pizzasales.aggregate import avg, count, distinct, group_by, order_by, sum_
from pizzasales.columns import as_dict
from pizzasales.exceptions import UnknownQueryError
from pizzasales.join import build_detail_join, build_menu_join
from pizzasales.mapper.factory import create_mapper
from pizzasales.mapper.protocol import RowMapper
from pizzasales.store import TableName, TableStore
from pizzasales.window import avg_over, rolling_sum, row_number, row_number_unordered

logger = logging.getLogger(__name__)

T = TypeVar("T")
Rows = list[dict[str, Any]]


@dataclass(frozen=True)
class QueryInfo:
    """カタログに登録されたクエリの情報."""

    number: int
    name: str
    description: str


_REGISTRY: dict[str, QueryInfo] = {}


def _query(number: int, description: str) -> Callable[[Callable[..., Rows]], Callable[..., Rows]]:
    """メソッドをカタログのクエリとして登録するデコレータ."""

    def decorator(func: Callable[..., Rows]) -> Callable[..., Rows]:
        _REGISTRY[func.__name__] = QueryInfo(number, func.__name__, description)
        return func

    return decorator


def order_month(row: Any) -> int:
    """``MONTH(order_date)``."""
    return row.order_date.month


def order_weekday(row: Any) -> int:
    """``WEEKDAY(order_date)``. 月曜 = 0 ... 日曜 = 6."""
    return row.order_date.weekday()


def order_day_name(row: Any) -> str:
    """``DAYNAME(order_date)``. ロケールに依存しない英語の曜日名."""
    return config.DAY_NAMES[order_weekday(row)]


def order_day(row: Any) -> int:
    """``DAY(order_date)``."""
    return row.order_date.day


def order_hour(row: Any) -> int:
    """``HOUR(order_time)``."""
    return row.order_time.hour


class QueryCatalog:
    """ピザ売上データに対する名前付き分析クエリ.

    各クエリは引数なしのメソッドで、カラム名→値の dict のリストを返す。
    名前または番号を指定して ``run`` からも実行できる。

    Examples:
        >>> catalog = QueryCatalog(store)
        >>> catalog.most_ordered_pizza()[0]
        {'pizza_id': 'big_meat_s', 'count': 1811}
        >>> catalog.run(15)
        [{'weekday': 6, 'weekday_orders': 2624}, ...]

        結果をエンティティに変換:

        >>> catalog.query(PizzaCount, "most_ordered_pizza")

    """

    def __init__(self, store: TableStore) -> None:
        self._store = store

    @staticmethod
    def names() -> list[str]:
        """登録済みクエリ名を番号順で返す."""
        return [info.name for info in sorted(_REGISTRY.values(), key=lambda info: info.number)]

    @staticmethod
    def describe(query: str | int) -> QueryInfo:
        """クエリの情報を返す.

        Raises:
            UnknownQueryError: 未登録のクエリの場合

        """
        if isinstance(query, int):
            for info in _REGISTRY.values():
                if info.number == query:
                    return info
        elif query in _REGISTRY:
            return _REGISTRY[query]
        raise UnknownQueryError(format_error("unknown_query", query=query))

    def run(self, query: str | int) -> Rows:
        """名前または番号でクエリを実行する.

        Raises:
            UnknownQueryError: 未登録のクエリの場合
            MissingTableError: クエリが参照するテーブルが未ロードの場合

        """
        info = self.describe(query)
        logger.debug("Running query %d: %s", info.number, info.name)
        return getattr(self, info.name)()

    def query(
        self,
        entity: type[T],
        query: str | int,
        *,
        mapper: RowMapper[T] | Callable[..., T] | None = None,
    ) -> list[T]:
        """クエリを実行し、結果をエンティティのリストで返す.

        Args:
            entity: エンティティクラス（dataclass または Pydantic モデル）
            query: クエリ名または番号
            mapper: カスタムマッパー（省略時は自動生成）

        """
        row_mapper = create_mapper(entity, mapper=mapper)
        return row_mapper.map_rows(self.run(query))

    def view_table(self, table: TableName | str) -> Rows:
        """基底テーブルの全行を返す（``SELECT * FROM table``）."""
        return [as_dict(record) for record in self._store.get(table)]

    # --- テーブル参照 ---

    @_query(1, "View all order details")
    def order_details(self) -> Rows:
        return self.view_table(TableName.ORDER_DETAILS)

    @_query(2, "View all orders")
    def orders(self) -> Rows:
        return self.view_table(TableName.ORDERS)

    @_query(3, "View all pizza types")
    def pizza_types(self) -> Rows:
        return self.view_table(TableName.PIZZA_TYPES)

    @_query(4, "View all pizzas")
    def pizzas(self) -> Rows:
        return self.view_table(TableName.PIZZAS)

    # --- 基本分析 ---

    @_query(5, "Rolling total of pizza prices ordered by price")
    def rolling_price_total(self) -> Rows:
        pizzas = order_by(self._store.get(TableName.PIZZAS), "price")
        return rolling_sum(pizzas, "price", "price")

    @_query(6, "Detailed order report over all four tables")
    def detailed_order_report(self) -> Rows:
        return [as_dict(row) for row in build_detail_join(self._store)]

    @_query(7, "Number of joined order detail rows")
    def order_detail_count(self) -> Rows:
        return [{"order_details_count": sum(1 for _ in build_detail_join(self._store))}]

    @_query(8, "Distinct order details with row numbers")
    def order_detail_row_numbers(self) -> Rows:
        numbered = row_number(build_detail_join(self._store), "order_details_id")
        return order_by(distinct(numbered, ["order_details_id", "row_number"]), "row_number")

    @_query(9, "Distinct orders with row numbers")
    def order_row_numbers(self) -> Rows:
        # 行番号は重複除去の前に振られるため、order_id が同じ明細も別の行として残る
        numbered = row_number(build_detail_join(self._store), "order_id")
        return order_by(distinct(numbered, ["order_id", "row_number"]), "row_number")

    # --- 売上・注文の傾向 ---

    @_query(10, "Order details with arrival row numbers")
    def order_detail_sequence(self) -> Rows:
        return row_number_unordered(self._store.get(TableName.ORDER_DETAILS))

    @_query(11, "Most ordered pizza")
    def most_ordered_pizza(self) -> Rows:
        counts = group_by(self._store.get(TableName.ORDER_DETAILS), "pizza_id", {"count": count()})
        return order_by(counts, "count", descending=True)

    @_query(12, "Total number of pizza items ordered")
    def total_items_ordered(self) -> Rows:
        counts = self.most_ordered_pizza()
        total = sum(row["count"] for row in counts) if counts else None
        return [{"total_items": total}]

    @_query(13, "Orders with the highest total quantity")
    def top_orders_by_quantity(self) -> Rows:
        quantities = group_by(
            self._store.get(TableName.ORDER_DETAILS),
            "order_id",
            {"quantity_ordered": sum_("quantity")},
        )
        return order_by(quantities, "quantity_ordered", descending=True)

    @_query(14, "Orders per month")
    def monthly_sales(self) -> Rows:
        return group_by(
            self._store.get(TableName.ORDERS),
            {"month": order_month},
            {"monthly_orders": count()},
        )

    @_query(15, "Orders per weekday index (0 = Monday)")
    def weekday_sales(self) -> Rows:
        counts = group_by(
            self._store.get(TableName.ORDERS),
            {"weekday": order_weekday},
            {"weekday_orders": count()},
        )
        return order_by(counts, "weekday_orders")

    @_query(16, "Orders per day name")
    def day_name_sales(self) -> Rows:
        counts = group_by(
            self._store.get(TableName.ORDERS),
            {"weekday": order_day_name},
            {"dayname_orders": count()},
        )
        return order_by(counts, "dayname_orders")

    @_query(17, "Orders per day of month")
    def day_of_month_sales(self) -> Rows:
        return group_by(
            self._store.get(TableName.ORDERS),
            {"date": order_day},
            {"date_orders": count()},
        )

    @_query(18, "Busiest hours of the day")
    def peak_sales_hour(self) -> Rows:
        counts = group_by(
            self._store.get(TableName.ORDERS),
            {"hour_of_day": order_hour},
            {"order_count": count()},
        )
        return order_by(counts, "order_count", descending=True)

    # --- ピザ種別と価格 ---

    @_query(19, "Pizza type varieties per category")
    def varieties_by_category(self) -> Rows:
        return group_by(self._store.get(TableName.PIZZA_TYPES), "category", {"count": count()})

    @_query(20, "Average price per pizza type")
    def avg_price_by_type(self) -> Rows:
        return group_by(
            build_menu_join(self._store), "pizza_type_id", {"avg_price": avg("price")}
        )

    @_query(21, "Average price per category")
    def avg_price_by_category(self) -> Rows:
        return group_by(
            build_menu_join(self._store),
            "category",
            {"avg_price": avg("price", digits=config.AVG_PRICE_DIGITS)},
        )

    @_query(22, "Average price per category as a window")
    def avg_price_by_category_window(self) -> Rows:
        return avg_over(
            build_menu_join(self._store),
            "category",
            "price",
            digits=config.AVG_PRICE_DIGITS,
        )

    @_query(23, "Pizzas available per size")
    def sizes_available(self) -> Rows:
        return group_by(self._store.get(TableName.PIZZAS), "size", {"count": count()})

    @_query(24, "Best-selling pizzas with a rolling total of order counts")
    def best_selling_pizzas(self) -> Rows:
        pizzas = {pizza.pizza_id: pizza for pizza in self._store.get(TableName.PIZZAS)}
        counts = [
            {
                "pizza_id": row["pizza_id"],
                "pizza_type_id": pizzas[row["pizza_id"]].pizza_type_id,
                "count": row["count"],
            }
            for row in self.most_ordered_pizza()
            if row["pizza_id"] in pizzas
        ]
        return order_by(rolling_sum(counts, "count", "count"), "count")
