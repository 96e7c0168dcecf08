from __future__ import annotations

import hashlib
import secrets
import time
from dataclasses import dataclass

RANDOM_CODE_MIN = 10000
RANDOM_CODE_MAX = 20000


@dataclass(frozen=True)
class BookingHash:
    """予約ハッシュ

    システムが採番する予約の一意な識別子。一意性はストレージの
    条件付き書き込みで保証する。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Booking hash cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls, algorithm: str = "sha3_256") -> BookingHash:
        """乱数と現在時刻（ミリ秒）からハッシュを生成する"""
        random_code = RANDOM_CODE_MIN + secrets.randbelow(
            RANDOM_CODE_MAX - RANDOM_CODE_MIN
        )
        now_ms = time.time_ns() // 1_000_000
        digest = hashlib.new(algorithm, f"{random_code}{now_ms}".encode())
        return cls(value=f"0x{digest.hexdigest()}")
