"""結合ビルダー.

``order_details`` を起点とする明細結合と、``pizza_types`` と ``pizzas`` の
メニュー結合を生成する。いずれも内部結合で、参照先が解決できない行は
エラーにせず除外する。
"""

from __future__ import annotations

from collections.abc import Iterator

from pizzasales.models import JoinedRow, MenuRow
from pizzasales.store import TableName, TableStore


def build_detail_join(store: TableStore) -> Iterator[JoinedRow]:
    """order_details ⋈ orders ⋈ pizzas ⋈ pizza_types を遅延生成する.

    出力順は ``order_details`` の格納順に従う。``order_id``、``pizza_id``、
    ピザの ``pizza_type_id`` のいずれかが解決できない明細は除外する。

    Args:
        store: テーブルストア

    Yields:
        明細1行ごとの結合行（``total_price = quantity * price``）

    Raises:
        MissingTableError: 4テーブルのいずれかが未ロードの場合

    """
    details = store.get(TableName.ORDER_DETAILS)
    orders = {o.order_id: o for o in store.get(TableName.ORDERS)}
    pizzas = {p.pizza_id: p for p in store.get(TableName.PIZZAS)}
    pizza_types = {t.pizza_type_id: t for t in store.get(TableName.PIZZA_TYPES)}
    return _detail_rows(details, orders, pizzas, pizza_types)


def _detail_rows(details, orders, pizzas, pizza_types) -> Iterator[JoinedRow]:
    for detail in details:
        order = orders.get(detail.order_id)
        pizza = pizzas.get(detail.pizza_id)
        if order is None or pizza is None:
            continue
        pizza_type = pizza_types.get(pizza.pizza_type_id)
        if pizza_type is None:
            continue
        yield JoinedRow(
            order_details_id=detail.order_details_id,
            order_id=order.order_id,
            order_date=order.order_date,
            order_time=order.order_time,
            pizza_id=detail.pizza_id,
            pizza_type_id=pizza_type.pizza_type_id,
            name=pizza_type.name,
            category=pizza_type.category,
            size=pizza.size,
            quantity=detail.quantity,
            price=pizza.price,
            total_price=detail.quantity * pizza.price,
        )


def build_menu_join(store: TableStore) -> Iterator[MenuRow]:
    """pizza_types ⋈ pizzas を遅延生成する.

    ``pizza_types`` の順、同一種別内では ``pizzas`` の順に出力する。
    """
    pizzas_by_type: dict[str, list] = {}
    for pizza in store.get(TableName.PIZZAS):
        pizzas_by_type.setdefault(pizza.pizza_type_id, []).append(pizza)
    pizza_types = store.get(TableName.PIZZA_TYPES)
    return (
        MenuRow(
            pizza_type_id=pizza_type.pizza_type_id,
            name=pizza_type.name,
            category=pizza_type.category,
            ingredients=pizza_type.ingredients,
            pizza_id=pizza.pizza_id,
            size=pizza.size,
            price=pizza.price,
        )
        for pizza_type in pizza_types
        for pizza in pizzas_by_type.get(pizza_type.pizza_type_id, ())
    )
