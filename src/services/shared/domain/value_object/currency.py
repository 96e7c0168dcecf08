from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード

    サポート対象: ETH, LIF, USD
    """

    DECIMALS: ClassVar[dict[str, int]] = {"ETH": 18, "LIF": 18, "USD": 2}

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.DECIMALS:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.DECIMALS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def decimals(self) -> int:
        """最小単位までの桁数（ETH なら wei までの 18 桁）"""
        return self.DECIMALS[self.code]

    @classmethod
    def eth(cls) -> Currency:
        """イーサ"""
        return cls("ETH")
