"""エラーメッセージの組み立て."""

from __future__ import annotations

from pizzasales import config

_MESSAGES = {
    "ja": {
        "unknown_table": "未知のテーブルです",
        "missing_table": "テーブルがロードされていません",
        "invalid_group_key": "キーのカラムを解決できません",
        "invalid_aggregate_input": "集計入力のカラムを解決できません",
        "unknown_query": "未知のクエリです",
    },
    "en": {
        "unknown_table": "Unknown table",
        "missing_table": "Table is not loaded",
        "invalid_group_key": "Failed to resolve key column",
        "invalid_aggregate_input": "Failed to resolve aggregate input column",
        "unknown_query": "Unknown query",
    },
}


def format_error(key: str, /, **details: object) -> str:
    """``config.ERROR_MESSAGE_LANGUAGE`` に従ってエラーメッセージを組み立てる.

    Args:
        key: メッセージキー
        **details: メッセージ末尾に ``name='value'`` 形式で付与する詳細

    Returns:
        エラーメッセージ

    """
    lang = config.ERROR_MESSAGE_LANGUAGE
    base = _MESSAGES.get(lang, _MESSAGES["ja"]).get(key, key)
    if not details:
        return base
    detail = " ".join(f"{name}={value!r}" for name, value in details.items())
    return f"{base}: {detail}"
