from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約レコードID（永続化用の識別子）"""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """新しい BookingId を採番する"""
        return cls(value=uuid.uuid4().hex)
