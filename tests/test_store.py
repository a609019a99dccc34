"""TableStore のテスト."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from conftest import ORDERS, PIZZAS
from pizzasales import (
    MappingError,
    MissingTableError,
    Pizza,
    TableName,
    TableStore,
    UnknownTableError,
)


class TestTableName:
    """TableName の解決."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("orders", TableName.ORDERS),
            ("order_details", TableName.ORDER_DETAILS),
            ("pizzas", TableName.PIZZAS),
            ("pizza_types", TableName.PIZZA_TYPES),
        ],
    )
    def test_resolve_by_name(self, name: str, expected: TableName) -> None:
        assert TableName.resolve(name) is expected

    def test_resolve_member(self) -> None:
        assert TableName.resolve(TableName.PIZZAS) is TableName.PIZZAS

    def test_record_type(self) -> None:
        assert TableName.PIZZAS.record_type is Pizza

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownTableError):
            TableName.resolve("customers")


class TestTableStoreLoad:
    """load / get の基本動作."""

    def test_load_converts_rows_to_records(self) -> None:
        store = TableStore()
        store.load("pizzas", PIZZAS)
        snapshot = store.get("pizzas")
        assert isinstance(snapshot, tuple)
        assert all(isinstance(pizza, Pizza) for pizza in snapshot)
        assert snapshot[0].price == Decimal("13.25")

    def test_load_keeps_input_order(self) -> None:
        store = TableStore()
        store.load("pizzas", PIZZAS)
        assert [pizza.pizza_id for pizza in store.get("pizzas")] == [
            row["pizza_id"] for row in PIZZAS
        ]

    def test_load_accepts_records(self) -> None:
        store = TableStore()
        pizza = Pizza(pizza_id="A", pizza_type_id="veg", size="M", price=Decimal("10"))
        store.load(TableName.PIZZAS, [pizza])
        assert store.get(TableName.PIZZAS) == (pizza,)

    def test_load_replaces_wholesale(self) -> None:
        store = TableStore()
        store.load("pizzas", PIZZAS)
        store.load("pizzas", PIZZAS[:1])
        assert len(store.get("pizzas")) == 1

    def test_load_empty_table(self) -> None:
        store = TableStore()
        store.load("orders", [])
        assert store.get("orders") == ()

    def test_load_with_callable_mapper(self) -> None:
        store = TableStore()
        store.load(
            "pizzas",
            [("A", "veg", "M", "9.99")],
            mapper=lambda row: Pizza(pizza_id=row[0], pizza_type_id=row[1], size=row[2], price=row[3]),
        )
        assert store.get("pizzas")[0].price == Decimal("9.99")

    def test_load_logs_row_count(self, caplog: pytest.LogCaptureFixture) -> None:
        store = TableStore()
        with caplog.at_level(logging.INFO, logger="pizzasales.store"):
            store.load("orders", ORDERS)
        assert "Loaded 5 rows into orders" in caplog.text


class TestTableStoreErrors:
    """エラー時の挙動."""

    def test_get_unknown_table(self) -> None:
        with pytest.raises(UnknownTableError):
            TableStore().get("customers")

    def test_load_unknown_table(self) -> None:
        with pytest.raises(UnknownTableError):
            TableStore().load("customers", [])

    def test_get_not_loaded_table(self) -> None:
        with pytest.raises(MissingTableError):
            TableStore().get("orders")

    def test_invalid_row_raises_mapping_error(self) -> None:
        with pytest.raises(MappingError):
            TableStore().load(
                "order_details",
                [{"order_details_id": 1, "order_id": 1, "pizza_id": "A", "quantity": 0}],
            )

    def test_failed_load_keeps_previous_snapshot(self) -> None:
        """全行の変換に成功しない限り差し替えない."""
        store = TableStore()
        store.load("pizzas", PIZZAS)
        broken = [*PIZZAS, {"pizza_id": "X", "pizza_type_id": "x", "size": "M", "price": "-1"}]
        with pytest.raises(MappingError):
            store.load("pizzas", broken)
        assert len(store.get("pizzas")) == len(PIZZAS)

    def test_mapper_returning_wrong_type(self) -> None:
        with pytest.raises(MappingError):
            TableStore().load("pizzas", PIZZAS, mapper=lambda row: dict(row))


class TestTableStoreState:
    """is_loaded / clear."""

    def test_is_loaded(self) -> None:
        store = TableStore()
        assert not store.is_loaded("orders")
        store.load("orders", ORDERS)
        assert store.is_loaded("orders")

    def test_reload_leaves_previous_snapshot_intact(self, store: TableStore) -> None:
        """取得済みのスナップショットは後続の load の影響を受けない."""
        before = store.get("orders")
        store.load("orders", ORDERS[:2])
        after = store.get("orders")
        assert len(before) == len(ORDERS)
        assert [order.order_id for order in before] == [row["order_id"] for row in ORDERS]
        assert [order.order_id for order in after] == [1, 2]
        assert after is not before

    def test_clear(self, store: TableStore) -> None:
        store.clear()
        for table in TableName:
            assert not store.is_loaded(table)
