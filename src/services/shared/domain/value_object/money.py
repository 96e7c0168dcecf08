from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def to_smallest_unit(self) -> int:
        """最小単位（wei 等）の整数に変換する

        Decimal のまま桁をずらすため浮動小数点の誤差は入らない。
        最小単位未満の端数は切り捨てる。
        """
        scaled = self.amount.scaleb(self.currency.decimals)
        return int(scaled.to_integral_value(rounding=ROUND_DOWN))
