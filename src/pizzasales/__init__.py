"""pizzasales: ピザ売上データのインメモリ分析エンジン."""

from pizzasales.aggregate import (
    Aggregate,
    AggregateFunction,
    avg,
    count,
    distinct,
    group_by,
    order_by,
    sum_,
)
from pizzasales.catalog import QueryCatalog, QueryInfo
from pizzasales.exceptions import (
    DataFileNotFoundError,
    InvalidAggregateInputError,
    InvalidGroupKeyError,
    MappingError,
    MissingTableError,
    PizzaSalesError,
    UnknownQueryError,
    UnknownTableError,
)
from pizzasales.join import build_detail_join, build_menu_join
from pizzasales.loader import CsvTableLoader
from pizzasales.mapper import Column, ManualMapper, RowMapper, create_mapper
from pizzasales.models import JoinedRow, MenuRow, Order, OrderDetail, Pizza, PizzaType
from pizzasales.store import TableName, TableStore
from pizzasales.window import avg_over, rolling_sum, row_number, row_number_unordered

__all__ = [
    "Aggregate",
    "AggregateFunction",
    "Column",
    "CsvTableLoader",
    "DataFileNotFoundError",
    "InvalidAggregateInputError",
    "InvalidGroupKeyError",
    "JoinedRow",
    "ManualMapper",
    "MappingError",
    "MenuRow",
    "MissingTableError",
    "Order",
    "OrderDetail",
    "Pizza",
    "PizzaSalesError",
    "PizzaType",
    "QueryCatalog",
    "QueryInfo",
    "RowMapper",
    "TableName",
    "TableStore",
    "UnknownQueryError",
    "UnknownTableError",
    "avg",
    "avg_over",
    "build_detail_join",
    "build_menu_join",
    "count",
    "create_mapper",
    "distinct",
    "group_by",
    "order_by",
    "rolling_sum",
    "row_number",
    "row_number_unordered",
    "sum_",
]
