from __future__ import annotations

import hashlib
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from services.booking.domain.enum import RoomType
from services.shared.utils.validators import to_decimal

DEFAULT_ROOM_TYPE_PRICES: Mapping[RoomType, Decimal] = MappingProxyType(
    {
        RoomType.DOUBLE: Decimal("100"),
        RoomType.TWIN: Decimal("80"),
    }
)


@dataclass(frozen=True)
class BookingConfig:
    """予約ドメインの設定値

    プロセス起動時に一度だけ組み立て、以降は読み取り専用で扱う。
    room_type_prices は部屋タイプごとの1泊あたりの基本料金（USD）。
    """

    signature_time_limit_minutes: int = 30
    room_type_prices: Mapping[RoomType, Decimal] = field(
        default_factory=lambda: DEFAULT_ROOM_TYPE_PRICES
    )
    payment_epsilon: Decimal = Decimal("0.00001")
    hash_algorithm: str = "sha3_256"

    def __post_init__(self) -> None:
        if self.signature_time_limit_minutes < 0:
            raise ValueError("Signature time limit cannot be negative")
        missing = [t.value for t in RoomType if t not in self.room_type_prices]
        if missing:
            raise ValueError(f"Missing base price for room types: {missing}")
        if any(price <= 0 for price in self.room_type_prices.values()):
            raise ValueError("Room type prices must be positive")
        if self.payment_epsilon < 0:
            raise ValueError("Payment epsilon cannot be negative")
        if self.hash_algorithm not in hashlib.algorithms_available:
            raise ValueError(f"Unsupported hash algorithm: {self.hash_algorithm}")
        object.__setattr__(
            self, "room_type_prices", MappingProxyType(dict(self.room_type_prices))
        )

    def base_price(self, room_type: RoomType) -> Decimal:
        """部屋タイプの基本料金を返す"""
        return self.room_type_prices[room_type]

    @classmethod
    def from_env(cls) -> BookingConfig:
        """環境変数から設定を読み込む（未設定の項目はデフォルト値）"""
        defaults = cls()
        prices_json = os.getenv("ROOM_TYPE_PRICES")
        room_type_prices = (
            {RoomType(k): to_decimal(v) for k, v in json.loads(prices_json).items()}
            if prices_json
            else defaults.room_type_prices
        )
        return cls(
            signature_time_limit_minutes=int(
                os.getenv(
                    "SIGNATURE_TIME_LIMIT_MINUTES",
                    defaults.signature_time_limit_minutes,
                )
            ),
            room_type_prices=room_type_prices,
            payment_epsilon=to_decimal(
                os.getenv("PAYMENT_AMOUNT_EPSILON", defaults.payment_epsilon)
            ),
            hash_algorithm=os.getenv("BOOKING_HASH_ALGORITHM", defaults.hash_algorithm),
        )
