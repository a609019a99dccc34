"""pizzasales 例外クラス."""


class PizzaSalesError(Exception):
    """pizzasales の基底例外."""


class UnknownTableError(PizzaSalesError):
    """4つの基底テーブル以外のテーブル名が指定された."""


class MissingTableError(PizzaSalesError):
    """ロードされていないテーブルが参照された."""


class InvalidGroupKeyError(PizzaSalesError):
    """グループキー・並び順キー・パーティションキーが行から解決できない."""


class InvalidAggregateInputError(PizzaSalesError):
    """集計関数の入力カラムが行から解決できない."""


class MappingError(PizzaSalesError):
    """マッピングエラー."""


class DataFileNotFoundError(PizzaSalesError):
    """データファイルが見つからない."""


class UnknownQueryError(PizzaSalesError):
    """クエリカタログに存在しないクエリが指定された."""
