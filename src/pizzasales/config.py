"""pizzasales の設定値.

モジュール変数として保持し、利用側（テストを含む）は
``monkeypatch.setattr(config, ...)`` などで上書きする。
"""

from __future__ import annotations

ERROR_MESSAGE_LANGUAGE = "ja"
"""エラーメッセージの言語 ("ja" / "en")."""

AVG_PRICE_DIGITS = 2
"""平均価格クエリの丸め桁数（SQL の ``ROUND(AVG(price), 2)`` 相当）."""

DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
"""曜日名（月曜始まり、ロケール非依存）. インデックスは ``WEEKDAY()`` の値と一致する."""
