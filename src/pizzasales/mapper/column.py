"""Column アノテーション."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Column:
    """マッピング元のカラム名を指定するアノテーション.

    Examples:
        >>> @dataclass
        ... class PizzaCount:
        ...     pizza: Annotated[str, Column("pizza_id")]
        ...     orders: Annotated[int, Column("count")]

    """

    name: str
