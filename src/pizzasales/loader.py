"""CsvTableLoader: CSV ファイルからの基底テーブル読み込み."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pizzasales.exceptions import DataFileNotFoundError
from pizzasales.store import TableName

if TYPE_CHECKING:
    from pizzasales.store import TableStore


class CsvTableLoader:
    """``<base_path>/<テーブル名>.csv`` を読み込んで TableStore にロードする.

    先頭行がヘッダ。文字コードは既定で UTF-8（公開データセットの一部は
    latin-1 のため ``encoding`` で指定できる）。値は文字列のまま渡し、型変換は
    各レコード型のバリデーションに任せる。

    Examples:
        >>> store = TableStore()
        >>> CsvTableLoader("data").load_all(store)

    """

    def __init__(self, base_path: str | Path = "data", *, encoding: str = "utf-8") -> None:
        self.base_path = Path(base_path)
        self.encoding = encoding

    def path_for(self, table: TableName | str) -> Path:
        """テーブルの CSV ファイルパスを返す."""
        name = TableName.resolve(table)
        return self.base_path / f"{name.table_id}.csv"

    def read(self, table: TableName | str) -> list[dict[str, Any]]:
        """CSV を読み込み、カラム名→値の行のリストで返す.

        Raises:
            UnknownTableError: 未知のテーブル名の場合
            DataFileNotFoundError: ファイルが存在しない場合

        """
        base_path = self.base_path.resolve()
        file_path = self.path_for(table).resolve()
        if not self._is_valid_path(base_path, file_path):
            msg = f"Data file not found: {file_path}"
            raise DataFileNotFoundError(msg)
        with file_path.open(encoding=self.encoding, newline="") as f:
            return [dict(row) for row in csv.DictReader(f)]

    def load(self, store: TableStore, table: TableName | str) -> None:
        """1テーブルを読み込んでストアにロードする."""
        store.load(table, self.read(table))

    def load_all(self, store: TableStore) -> None:
        """4テーブルすべてを読み込んでストアにロードする."""
        for table in TableName:
            self.load(store, table)

    @staticmethod
    def _is_valid_path(base_path: Path, file_path: Path) -> bool:
        """ファイルパスが有効か（base_path 配下に存在するか）を判定する."""
        if file_path != base_path and base_path not in file_path.parents:
            return False
        return file_path.is_file()
