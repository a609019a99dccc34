"""pytest 共通設定: サンプルのピザ売上データ."""

from __future__ import annotations

from typing import Any

import pytest

from pizzasales import QueryCatalog, TableStore

# --- サンプルデータ（公開データセットと同じカラム構成の抜粋） ---
PIZZA_TYPES: list[dict[str, Any]] = [
    {
        "pizza_type_id": "hawaiian",
        "name": "The Hawaiian Pizza",
        "category": "Classic",
        "ingredients": "Sliced Ham, Pineapple, Mozzarella Cheese",
    },
    {
        "pizza_type_id": "classic_dlx",
        "name": "The Classic Deluxe Pizza",
        "category": "Classic",
        "ingredients": "Pepperoni, Mushrooms, Red Onions, Red Peppers, Bacon",
    },
    {
        "pizza_type_id": "five_cheese",
        "name": "The Five Cheese Pizza",
        "category": "Veggie",
        "ingredients": "Mozzarella Cheese, Provolone Cheese, Smoked Gouda Cheese, "
        "Romano Cheese, Blue Cheese, Garlic",
    },
    {
        "pizza_type_id": "bbq_ckn",
        "name": "The Barbecue Chicken Pizza",
        "category": "Chicken",
        "ingredients": "Barbecued Chicken, Red Peppers, Green Peppers, Tomatoes, "
        "Red Onions, Barbecue Sauce",
    },
]

PIZZAS: list[dict[str, Any]] = [
    {"pizza_id": "hawaiian_m", "pizza_type_id": "hawaiian", "size": "M", "price": "13.25"},
    {"pizza_id": "classic_dlx_m", "pizza_type_id": "classic_dlx", "size": "M", "price": "16.00"},
    {"pizza_id": "five_cheese_l", "pizza_type_id": "five_cheese", "size": "L", "price": "18.50"},
    {"pizza_id": "bbq_ckn_s", "pizza_type_id": "bbq_ckn", "size": "S", "price": "12.75"},
    {"pizza_id": "hawaiian_s", "pizza_type_id": "hawaiian", "size": "S", "price": "10.50"},
]

# 2015-01-01 は木曜、2015-01-02 は金曜、2015-02-02 は月曜、2015-02-08 は日曜
ORDERS: list[dict[str, Any]] = [
    {"order_id": 1, "order_date": "2015-01-01", "order_time": "11:38:36"},
    {"order_id": 2, "order_date": "2015-01-01", "order_time": "11:57:40"},
    {"order_id": 3, "order_date": "2015-01-02", "order_time": "12:12:28"},
    {"order_id": 4, "order_date": "2015-02-02", "order_time": "18:30:00"},
    {"order_id": 5, "order_date": "2015-02-08", "order_time": "12:05:00"},
]

ORDER_DETAILS: list[dict[str, Any]] = [
    {"order_details_id": 1, "order_id": 1, "pizza_id": "hawaiian_m", "quantity": 1},
    {"order_details_id": 2, "order_id": 2, "pizza_id": "classic_dlx_m", "quantity": 1},
    {"order_details_id": 3, "order_id": 2, "pizza_id": "five_cheese_l", "quantity": 1},
    {"order_details_id": 4, "order_id": 2, "pizza_id": "hawaiian_m", "quantity": 2},
    {"order_details_id": 5, "order_id": 3, "pizza_id": "hawaiian_m", "quantity": 1},
    {"order_details_id": 6, "order_id": 4, "pizza_id": "bbq_ckn_s", "quantity": 3},
    {"order_details_id": 7, "order_id": 5, "pizza_id": "hawaiian_s", "quantity": 1},
    {"order_details_id": 8, "order_id": 5, "pizza_id": "classic_dlx_m", "quantity": 2},
]


@pytest.fixture
def store() -> TableStore:
    """サンプルデータを4テーブルすべてにロードしたストア."""
    table_store = TableStore()
    table_store.load("pizza_types", PIZZA_TYPES)
    table_store.load("pizzas", PIZZAS)
    table_store.load("orders", ORDERS)
    table_store.load("order_details", ORDER_DETAILS)
    return table_store


@pytest.fixture
def catalog(store: TableStore) -> QueryCatalog:
    """サンプルデータに対するクエリカタログ."""
    return QueryCatalog(store)
