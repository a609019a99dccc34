"""pizzasales マッパーパッケージ."""

from pizzasales.mapper.column import Column
from pizzasales.mapper.factory import create_mapper
from pizzasales.mapper.manual import ManualMapper
from pizzasales.mapper.protocol import RowMapper

__all__ = ["Column", "ManualMapper", "RowMapper", "create_mapper"]
