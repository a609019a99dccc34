"""DataclassMapper: dataclass 用の自動マッパー."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import MISSING, fields, is_dataclass
from typing import Annotated, Any, ClassVar, get_args, get_origin, get_type_hints

from pizzasales.exceptions import MappingError
from pizzasales.mapper.column import Column


class DataclassMapper:
    """Dataclass 用の自動マッパー.

    フィールド名（または ``Annotated[T, Column("x")]`` で指定したカラム名）で
    行の値を取り出す。デフォルト値のないフィールドに対応するカラムが
    行に存在しない場合は ``MappingError``。
    """

    _mapping_cache: ClassVar[dict[type, dict[str, str]]] = {}

    def __init__(self, entity_cls: type) -> None:
        if not is_dataclass(entity_cls):
            msg = f"{entity_cls} is not a dataclass"
            raise TypeError(msg)
        self.entity_cls = entity_cls
        self._mapping = self._get_mapping(entity_cls)
        self._required = {
            f.name
            for f in fields(entity_cls)
            if f.init and f.default is MISSING and f.default_factory is MISSING
        }

    @classmethod
    def _get_mapping(cls, entity_cls: type) -> dict[str, str]:
        """フィールド名→カラム名のマッピングを取得（キャッシュ付き）."""
        if entity_cls not in cls._mapping_cache:
            cls._mapping_cache[entity_cls] = cls._build_mapping(entity_cls)
        return cls._mapping_cache[entity_cls]

    @staticmethod
    def _build_mapping(entity_cls: type) -> dict[str, str]:
        hints = get_type_hints(entity_cls, include_extras=True)
        mapping: dict[str, str] = {}
        for f in fields(entity_cls):
            if not f.init:
                continue
            mapping[f.name] = f.name
            type_hint = hints.get(f.name)
            if type_hint and get_origin(type_hint) is Annotated:
                for arg in get_args(type_hint)[1:]:
                    if isinstance(arg, Column):
                        mapping[f.name] = arg.name
                        break
        return mapping

    def map_row(self, row: Mapping[str, Any]) -> Any:
        """1行をレコードに変換."""
        kwargs: dict[str, Any] = {}
        for field_name, col_name in self._mapping.items():
            if col_name in row:
                kwargs[field_name] = row[col_name]
            elif field_name in self._required:
                msg = (
                    f"Column {col_name!r} required by "
                    f"{self.entity_cls.__name__}.{field_name} is missing"
                )
                raise MappingError(msg)
        return self.entity_cls(**kwargs)

    def map_rows(self, rows: Iterable[Mapping[str, Any]]) -> list[Any]:
        """複数行をレコードのリストに変換."""
        return [self.map_row(row) for row in rows]
